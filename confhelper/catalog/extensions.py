"""Documentation for extensions.json properties."""

ENTRIES = {
    "recommendations": {
        "description": 'List of extensions recommended for users of this workspace. Extensions are identified using their publisher name and extension name, e.g., "ms-python.python".',
        "type": "array",
        "default": "[]",
    },
    "unwantedRecommendations": {
        "description": "List of extensions not recommended for users of this workspace. This prevents certain extensions from appearing in the recommendations list.",
        "type": "array",
        "default": "[]",
    },
}
