"""Sweep configuration - fixed tables and the immutable config value.

This module contains all configuration values for logsweep, organized
into logical sections. There is no configuration file: the tables below
are baked in and turned into a SweepConfig once at startup by
load_config(), which is then passed explicitly to every component.

CRITICAL: This file should contain ONLY configuration.
NO scanning logic, NO filesystem access.
"""

from dataclasses import dataclass

# =============================================================================
# FILE SYSTEM CONFIGURATION
# =============================================================================

# Substrings that exclude a path from report/delete traversal.
# Matched literally against the forward-slash path - NOT globs. The
# "*"-prefixed entries therefore only match paths that contain an asterisk.
SKIP_PATTERNS: tuple[str, ...] = (
    # Version control
    ".git",
    ".svn",
    ".hg",
    ".bzr",
    "_darcs",

    # Node.js
    "node_modules",
    "bower_components",

    # Python
    "venv",
    "env",
    ".env",
    "__pycache__",
    ".pytest_cache",
    "*.egg-info",
    ".eggs",
    ".tox",

    # Ruby
    "vendor/bundle",
    ".bundle",

    # PHP / Go
    "vendor",
    "composer/cache",

    # Java/Kotlin/Rust
    "target",
    ".gradle",
    "build",
    ".maven",
    ".m2",
    "cargo/registry",

    # Go
    ".go/cache",
    "go/pkg",

    # .NET
    "bin",
    "obj",
    "packages",

    # Build outputs and distributions
    "dist",
    "out",
    "output",
    "release",
    "releases",
    "public/build",
    ".next",
    ".nuxt",
    ".vuepress/dist",

    # IDE and Editor
    ".idea",
    ".vscode",
    ".vs",
    "*.sublime-workspace",
    ".atom",

    # Documentation
    "docs/_build",
    "site",
    ".docusaurus",

    # Cache and Temp
    ".cache",
    "tmp",
    ".tmp",
    "temp",
    ".temp",

    # Coverage and Tests
    "coverage",
    ".nyc_output",
    "htmlcov",
    ".coverage",

    # Logs
    "logs",
    "*.log",

    # CI/CD
    ".jenkins",
    ".github",
    ".gitlab",
    ".circleci",

    # Dependency lockfiles
    "package-lock.json",
    "yarn.lock",
    "Gemfile.lock",
    "composer.lock",
    "poetry.lock",

    # Minified/Generated
    "*.min.js",
    "*.min.css",

    # Extensions
    "raycast",

    # Local state
    ".local",
    ".vim",

    # User defined
    "Library",
)


# =============================================================================
# FILE TYPE CONFIGURATION
# =============================================================================

# Lowercased extensions the scanner reads
RELEVANT_EXTENSIONS: frozenset[str] = frozenset({
    ".js",       # JavaScript
    ".jsx",      # React JavaScript
    ".ts",       # TypeScript
    ".tsx",      # React TypeScript
    ".vue",      # Vue single-file components
    ".mjs",      # ES Module JavaScript
    ".cjs",      # CommonJS JavaScript
    ".html",     # Markup with inline scripts
    ".md",       # Markdown code samples
})

# Any path containing one of these is treated as minified and ignored
MINIFIED_MARKERS: tuple[str, ...] = ("-min", ".min")


# =============================================================================
# SCANNER CONFIGURATION
# =============================================================================

TARGET_CALL = "console.log"

LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

# Reported statements longer than this are cut and suffixed with ELLIPSIS
MAX_STATEMENT_LENGTH = 500
ELLIPSIS = "..."


# =============================================================================
# BACKUP CONFIGURATION
# =============================================================================

BACKUP_SUFFIX = ".bak"


@dataclass(frozen=True)
class SweepConfig:
    """Immutable settings shared by the path filter, scanner, mutator and walker."""

    skip_patterns: tuple[str, ...] = SKIP_PATTERNS
    relevant_extensions: frozenset[str] = RELEVANT_EXTENSIONS
    minified_markers: tuple[str, ...] = MINIFIED_MARKERS
    target_call: str = TARGET_CALL
    line_comment: str = LINE_COMMENT
    block_comment_open: str = BLOCK_COMMENT_OPEN
    block_comment_close: str = BLOCK_COMMENT_CLOSE
    max_statement_length: int = MAX_STATEMENT_LENGTH
    ellipsis: str = ELLIPSIS
    backup_suffix: str = BACKUP_SUFFIX

    def __post_init__(self):
        if len(self.ellipsis) >= self.max_statement_length:
            raise ValueError("ellipsis must be shorter than max_statement_length")
        if not self.target_call:
            raise ValueError("target_call must not be empty")
        if not self.backup_suffix:
            raise ValueError("backup_suffix must not be empty")


def load_config() -> SweepConfig:
    """Build the process-wide configuration from the fixed tables."""
    return SweepConfig()
