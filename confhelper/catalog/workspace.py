"""Documentation for multi-root .code-workspace files."""

ENTRIES = {
    "folders": {
        "description": "List of folders in a multi-root workspace.",
        "type": "array",
        "default": "[]",
    },
    "workspace.settings": {
        "description": "Workspace settings that apply to the entire workspace.",
        "type": "object",
        "default": "{}",
    },
    "workspace.extensions": {
        "description": "Workspace extension recommendations.",
        "type": "object",
        "default": "{}",
    },
    "workspace.launch": {
        "description": "Workspace debug configurations.",
        "type": "object",
        "default": "{}",
    },
    "workspace.tasks": {
        "description": "Workspace task configurations.",
        "type": "object",
        "default": "{}",
    },
}
