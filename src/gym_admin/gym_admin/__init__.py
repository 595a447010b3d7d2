"""Gym Admin package.

Organized by feature modules (members, checkin, billing, staff, ...) with a thin
Flask controller layer over service/repository layers.
"""
