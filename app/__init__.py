"""
Lead Intake Portal
Public talent/company registration with a staff dashboard API.

Architecture:
- Relational store: talents, companies, users
- Upload directory: CV PDFs, served under /uploads
- SendGrid: best-effort welcome emails
"""

__version__ = "1.0.0"
