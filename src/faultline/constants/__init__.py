"""Constant tables for Faultline."""
