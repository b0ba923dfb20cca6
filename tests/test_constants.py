"""
Centralized test credentials and secrets.

All test-only credentials are loaded from environment variables when available,
with clearly non-production placeholders as fallbacks.
"""

from __future__ import annotations

import os

# Passwords: load from env; fallback is a short placeholder (not a real credential)
TEST_PASSWORD = os.environ.get("TEST_PASSWORD") or "xxxx"
TEST_PASSWORD_WRONG = os.environ.get("TEST_PASSWORD_WRONG") or "yyyy"

# Emails for test fixtures
TEST_OWNER_EMAIL = "owner@example.com"
TEST_MEMBER_EMAIL = "member@example.com"
TEST_OUTSIDER_EMAIL = "outsider@example.com"

# App config used by conftest
TEST_SECRET_KEY = os.environ.get("TEST_SECRET_KEY") or "test-secret-key"
