"""
SOLID Architect: shared constants.
"""

# SOLID ARCHITECT: ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_SOLID_ART: str = r"""
   _____ ____  __    ________
  / ___// __ \/ /   /  _/ __ \   [ v1 ]
  \__ \/ / / / /    / // / / /   Design Principle Auditor
 ___/ / /_/ / /____/ // /_/ /
/____/\____/_____/___/_____/
"""
SOLID_BANNER = _CYAN + _SOLID_ART + _RESET

# Rule registry keys are e.g. 'solid.LSP'.
REGISTRY_PREFIX: str = "solid."

# Category assigned to dependencies matching no technical suffix.
DOMAIN_CATEGORY: str = "domain"

DEFAULT_SRP_CATEGORIES: dict[str, tuple[str, ...]] = {
    "persistence": ("Repository", "DAO", "Connection"),
    "communication": ("Sender", "Client"),
}

DEFAULT_SEVERITIES: dict[str, str] = {
    "SRP": "info",
    "OCP": "warning",
    "LSP": "error",
    "ISP": "warning",
    "DIP": "warning",
}

REPORT_FORMATS: tuple[str, ...] = ("text", "json", "table")

CONFIG_SECTION: str = "solid-architect"
