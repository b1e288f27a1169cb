"""Documentation for keybindings.json properties."""

ENTRIES = {
    "keybinding.key": {
        "description": "Key or key sequence (separate keys with plus-sign and sequences with space).",
        "type": "string",
        "default": "ctrl+shift+p",
    },
    "keybinding.command": {
        "description": "Identifier of the command to run when keybinding is triggered.",
        "type": "string",
        "default": "workbench.action.showCommands",
    },
    "when": {
        "description": "Condition when the key binding is in effect.",
        "type": "string",
        "default": "",
    },
    "keybinding.args": {
        "description": "Arguments to pass to the command.",
        "type": "any",
        "default": None,
    },
}
