"""Setting keys, credential identifiers and user-facing strings."""

# Settings namespace roots
CONFIG_ROOT = "chat"
TELEMETRY_CONFIG_ROOT = "telemetry"

# Keys relative to CONFIG_ROOT
LEGACY_TOKEN_KEY = "slack.legacyToken"
PROXY_URL_KEY = "proxyUrl"
REJECT_TLS_UNAUTHORIZED_KEY = "rejectTlsUnauthorized"
PROVIDERS_KEY = "providers"

# Key relative to TELEMETRY_CONFIG_ROOT
TELEMETRY_ENABLED_KEY = "enableTelemetry"

# Secure store address of the chat token
CREDENTIAL_SERVICE_NAME = "vscode-chat"
CREDENTIAL_ACCOUNT_NAME = "slack"

# Provider names checked against the providers list
TRAVIS_PROVIDER = "travis"

# Event source passed along with the sign-in command
SOURCE_INFO = "info"

# HTTP client identification
USER_AGENT = "chat-auth/0.1"

# Notification strings
TOKEN_NOT_FOUND = "Slack token not found. Sign in to start chatting."
SIGN_IN_SLACK = "Sign in with Slack"
DONT_HAVE_SLACK = "I don't use Slack"
PROVIDER_PROMPT = "Which chat provider do you use?"
PROVIDER_PLACEHOLDER = "For example: Discord, Microsoft Teams, Telegram"
NEW_PROVIDER_ISSUE_TITLE = "Add new chat provider: {provider}"
NEW_PROVIDER_ISSUE_BODY = "My chat provider is {provider}"
