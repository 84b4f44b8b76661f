"""
Wholesale inquiry service for Cosmopolis Coffee.

Receives submissions from the public wholesale form and:
- Validates required fields and the submitter's email
- Renders the inquiry into an HTML email
- Sends it to the wholesale team through the Resend API
"""

__version__ = "1.0.0"
