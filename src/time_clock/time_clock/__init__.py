"""Biometric Time Clock package.

Organized by feature modules (employees, attendance, docs) with a thin Flask
controller layer over service/repository layers.
"""
