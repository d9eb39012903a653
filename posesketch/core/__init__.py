"""Keypoint data model, geometry and frame state"""
