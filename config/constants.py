"""
Centralized constants for the Strategic Advisor dispatch service.
All magic numbers and fixed strings live here.
"""

# ===========================================
# COMPLETION PROVIDER
# ===========================================
PROVIDER_DEFAULT = "openrouter"
PROVIDER_MODEL = "xiaomi/mimo-v2-flash:free"
PROVIDER_TEMPERATURE = 0.6
PROVIDER_MAX_TOKENS = 4096
PROVIDER_TIMEOUT_SECONDS = 120
SYSTEM_PROMPT = "You are a brutally honest strategic advisor."

# ===========================================
# OUTPUT FORMATS
# ===========================================
OUTPUT_FORMATS = ("PDF", "HTML", "EMAIL")
DEFAULT_OUTPUT_FORMAT = "PDF"

# ===========================================
# RENDERING
# ===========================================
FOOTER_TEXT = "Generated by Strategic Advisor System"
TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"

# Print/document layout (points)
PAGE_MARGIN_PT = 36
BODY_FONT_SIZE_PT = 11
HEADING_SPACE_BEFORE_PT = 16
HEADING_SPACE_AFTER_PT = 6
PARAGRAPH_LINE_SPACING = 1.4
PARAGRAPH_SPACE_AFTER_PT = 8
TITLE_SPACER_COUNT = 2

# ===========================================
# PDF CONVERSION
# ===========================================
PDF_ENGINES = ("auto", "libreoffice", "reportlab")
LIBREOFFICE_TIMEOUT_SECONDS = 60

# ===========================================
# DELIVERY
# ===========================================
SMTP_TIMEOUT_SECONDS = 30
EMAIL_SUBJECT_TEMPLATE = "{agent_name} - Output"
PDF_EMAIL_BODY_TEMPLATE = "Attached is the strategic report for {agent_name}."
PDF_FILENAME_TEMPLATE = "{agent_name}-Output.pdf"

# ===========================================
# FILE HANDLING
# ===========================================
AGENTS_FILE = 'data/agents.json'
TEMP_DIR = 'data/temp'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/advisor.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
