"""Capture thread, overlays and snapshot export"""
