# src/ignorekit/config.py

IGNORE_FILE_NAME = ".gitignore"

# Title of the section holding patterns passed on the command line
OUTPUT_SECTION = "Added by ignorekit"

# Well-known sections, reconciled on every run in this order
DEFAULT_SECTIONS = {
    "Dependencies": [
        "node_modules/",
        ".venv/",
        "venv/",
    ],
    "Build output": [
        "dist/",
        "build/",
        "target/",
        "*.egg-info/",
    ],
    "Caches": [
        "__pycache__/",
        ".pytest_cache/",
        "*.pyc",
    ],
    "Editors": [
        ".vscode/",
        ".idea/",
        ".DS_Store",
    ],
    "Logs": [
        "*.log",
        "logs/",
    ],
}
