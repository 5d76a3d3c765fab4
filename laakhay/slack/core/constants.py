"""Constants shared across the library.

Block Kit limits are inclusive upper bounds: a value exactly at the limit is
accepted.
"""

BASE_URL = "https://slack.com/api/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_ATTEMPTS = 3

# Backoff defaults (seconds)
BACKOFF_BASE = 1.0
BACKOFF_MULTIPLIER = 2.0
BACKOFF_MAX = 300.0

VERSION = "0.1.0"
USER_AGENT_NAME = "laakhay-slack"

# Header names
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_REQUEST_TIMESTAMP = "x-slack-request-timestamp"
HEADER_SIGNATURE = "x-slack-signature"

JSON_CONTENT_TYPE = "application/json;charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Request signing
SIGNATURE_VERSION = "v0"
SIGNATURE_PREFIX = "v0="
MAX_REQUEST_AGE_SECONDS = 300

# Remote error codes that mean the token itself is unusable
AUTH_ERROR_CODES = frozenset(
    {
        "not_authed",
        "invalid_auth",
        "account_inactive",
        "token_revoked",
        "token_expired",
        "no_permission",
        "missing_scope",
        "not_allowed_token_type",
    }
)

# Text objects
MAX_TEXT_LENGTH = 3000

# Composition objects
MAX_OPTION_TEXT_LENGTH = 75
MAX_OPTION_VALUE_LENGTH = 75
MAX_OPTION_DESCRIPTION_LENGTH = 75
MAX_OPTION_GROUP_LABEL_LENGTH = 75
MAX_CONFIRM_TITLE_LENGTH = 100
MAX_CONFIRM_TEXT_LENGTH = 300
MAX_CONFIRM_BUTTON_LENGTH = 30

# Elements
MAX_ACTION_ID_LENGTH = 255
MAX_PLACEHOLDER_LENGTH = 150
MAX_BUTTON_TEXT_LENGTH = 75
MAX_BUTTON_VALUE_LENGTH = 2000
MAX_ACCESSIBILITY_LABEL_LENGTH = 75
MAX_URL_LENGTH = 3000
MAX_ALT_TEXT_LENGTH = 2000
MAX_INPUT_VALUE_LENGTH = 3000
MAX_SELECT_OPTIONS = 100
MAX_SELECT_OPTION_GROUPS = 100
MAX_INITIAL_OPTIONS = 100
MIN_OVERFLOW_OPTIONS = 2
MAX_OVERFLOW_OPTIONS = 5
MAX_CHECKBOX_OPTIONS = 10
MAX_RADIO_OPTIONS = 10

# Blocks
MAX_BLOCK_ID_LENGTH = 255
MAX_SECTION_FIELDS = 10
MAX_SECTION_FIELD_LENGTH = 2000
MAX_HEADER_TEXT_LENGTH = 150
MAX_ACTIONS_ELEMENTS = 25
MAX_CONTEXT_ELEMENTS = 10
MAX_INPUT_LABEL_LENGTH = 2000
MAX_INPUT_HINT_LENGTH = 2000
MAX_IMAGE_TITLE_LENGTH = 2000

# Views
MAX_VIEW_BLOCKS = 100
MAX_VIEW_TITLE_LENGTH = 24
MAX_VIEW_BUTTON_LENGTH = 24
MAX_CALLBACK_ID_LENGTH = 255
MAX_EXTERNAL_ID_LENGTH = 255
MAX_PRIVATE_METADATA_LENGTH = 3000
