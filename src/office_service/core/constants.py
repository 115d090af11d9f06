"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_LIMIT = 10

USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PERSON_NAME_MAX_LENGTH = 100
ROLE_NAME_MAX_LENGTH = 50
ROLE_DESCRIPTION_MAX_LENGTH = 255
OFFICE_NAME_MAX_LENGTH = 100
OFFICE_ADDRESS_MAX_LENGTH = 255

# Roles created by the seed step, as (name, description).
DEFAULT_ROLES = (
    ("ADMIN", "Administrator"),
    ("USER", "Regular user"),
)
