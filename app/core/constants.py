"""Application constants.

Validation patterns and user-facing messages shared by the submission
models and the candidate listing.
"""

import re

# ---------------------------------------------------------------------------
# Validation patterns (same rules the submission forms enforce client-side)
# ---------------------------------------------------------------------------
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN: re.Pattern[str] = re.compile(r"^\+?[0-9]{9,12}$")
# 12 digits (new format) or 9 digits followed by V/X (old format)
NIC_PATTERN: re.Pattern[str] = re.compile(r"^\d{12}$|^\d{9}[vVxX]$")
LINKEDIN_PATTERN: re.Pattern[str] = re.compile(
    r"^https?://(www\.)?linkedin\.com/in/[a-zA-Z0-9-]+/?$"
)

# ---------------------------------------------------------------------------
# Validation messages
# ---------------------------------------------------------------------------
MSG_REQUIRED = "This field is required."
MSG_INVALID_EMAIL = "Invalid email format."
MSG_INVALID_PHONE = "Please enter a valid phone number (9-12 digits)."
MSG_INVALID_NIC = "Please enter a valid 12-digit or 9-digit + V/X NIC."
MSG_INVALID_LINKEDIN = "Please enter a valid LinkedIn profile URL."
MSG_SKILLS_REQUIRED = "Please add at least one skill."

# ---------------------------------------------------------------------------
# Listing messages
# ---------------------------------------------------------------------------
MSG_NO_CANDIDATES = "No candidates found matching your criteria."
MSG_NO_IDEAS = "No startup ideas have been posted yet."
MSG_NO_ADVERTISEMENTS = "No advertisements have been posted yet."

# Prefix applied to every retrieval failure surfaced to the user
FETCH_ERROR_PREFIX = "Backend Error"
