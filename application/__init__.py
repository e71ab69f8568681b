"""
Application Layer for FitGen API.

This package contains:
- ports/: Repository interfaces (what the services need)
- exceptions: Errors shared by services and infrastructure
"""
