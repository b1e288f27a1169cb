"""Documentation for tasks.json properties."""

ENTRIES = {
    "tasks.version": {
        "description": "Version of the task configuration format.",
        "type": "string",
        "default": "2.0.0",
    },
    "tasks": {
        "description": "Array of task configurations.",
        "type": "array",
        "default": "[]",
    },
    "task.label": {
        "description": "The user interface label for the task.",
        "type": "string",
        "default": "My Task",
    },
    "task.command": {
        "description": "The command to be executed.",
        "type": "string",
        "default": "echo",
    },
    "options": {
        "description": "Additional command options.",
        "type": "object",
        "default": "{}",
    },
    "group": {
        "description": "Defines to which group the task belongs.",
        "type": "string|object",
        "default": "build",
        "enum": ["build", "test"],
        "enum_descriptions": {
            "build": "Task is a build task",
            "test": "Task is a test task",
        },
    },
    "presentation": {
        "description": "Configures the panel that is used to present the task output and reads its input.",
        "type": "object",
        "default": "{}",
    },
    "problemMatcher": {
        "description": "The problem matcher to be used if a global command is executed.",
        "type": "string|array",
        "default": "[]",
    },
    "runOptions": {
        "description": "Configures when and how a task is run.",
        "type": "object",
        "default": "{}",
    },
    "dependsOn": {
        "description": "Defines the task that this task depends on.",
        "type": "string|array",
        "default": "[]",
    },
    "dependsOrder": {
        "description": "Defines the order in which dependent tasks are executed.",
        "type": "string",
        "default": "parallel",
        "enum": ["parallel", "sequence"],
        "enum_descriptions": {
            "parallel": "Dependent tasks are executed in parallel",
            "sequence": "Dependent tasks are executed in sequence",
        },
    },
    "isBackground": {
        "description": "Defines whether the task is kept alive and is running in the background.",
        "type": "boolean",
        "default": "false",
    },
    "promptOnClose": {
        "description": "Controls whether the task is prompted when VS Code closes with a running task.",
        "type": "boolean",
        "default": "false",
    },
    # Additional task properties
    "detail": {
        "description": "A human-readable string which is rendered less prominently in the user interface.",
        "type": "string",
        "default": "",
    },
    "hide": {
        "description": "Controls whether the task is hidden from the user interface.",
        "type": "boolean",
        "default": "false",
    },
    "icon": {
        "description": "The icon which is used in the task UI.",
        "type": "object",
        "default": "{}",
    },
    "runOn": {
        "description": "Specifies when the task should be run.",
        "type": "string",
        "default": "default",
        "enum": ["default", "folderOpen"],
        "enum_descriptions": {
            "default": "The task will only be run when executed through the command palette or keybinding",
            "folderOpen": "The task will be run when the containing folder is opened",
        },
    },
    # Task presentation options
    "presentation.echo": {
        "description": "Controls whether the executed command is echoed to the panel.",
        "type": "boolean",
        "default": "true",
    },
    "presentation.reveal": {
        "description": "Controls whether the panel is revealed when the task is run.",
        "type": "string",
        "default": "always",
        "enum": ["always", "silent", "never"],
        "enum_descriptions": {
            "always": "Always reveal the panel when the task is run",
            "silent": "Reveal the panel only if the task has output or errors",
            "never": "Never reveal the panel",
        },
    },
    "presentation.focus": {
        "description": "Controls whether the panel takes focus.",
        "type": "boolean",
        "default": "false",
    },
    "presentation.panel": {
        "description": "Controls if the panel is shared between tasks, dedicated to this task, or a new one is created on every run.",
        "type": "string",
        "default": "shared",
        "enum": ["shared", "dedicated", "new"],
        "enum_descriptions": {
            "shared": "The panel is shared between tasks",
            "dedicated": "A dedicated panel is used for this task",
            "new": "A new panel is created on every task run",
        },
    },
    "presentation.showReuseMessage": {
        "description": 'Controls whether to show the "Terminal will be reused by tasks" message.',
        "type": "boolean",
        "default": "true",
    },
    "presentation.clear": {
        "description": "Controls whether the terminal is cleared before executing the task.",
        "type": "boolean",
        "default": "false",
    },
    "presentation.group": {
        "description": "Controls whether the task is executed in a specific terminal group.",
        "type": "string",
        "default": "",
    },
    # Task options
    "options.cwd": {
        "description": "The current working directory of the executed program or script.",
        "type": "string",
        "default": "${workspaceFolder}",
    },
    "options.env": {
        "description": "The environment of the executed program or script.",
        "type": "object",
        "default": "{}",
    },
    "options.shell": {
        "description": "Configuration of the shell when task type is shell.",
        "type": "object",
        "default": "{}",
    },
    # Run options
    "runOptions.instanceLimit": {
        "description": "Controls how many instances of the task are allowed to run in parallel.",
        "type": "number",
        "default": "1",
    },
    "runOptions.reevaluateOnRerun": {
        "description": "Controls whether variables are re-evaluated when rerunning the task.",
        "type": "boolean",
        "default": "true",
    },
    # Problem matcher patterns
    "problemMatcher.$gcc": {
        "description": "Problem matcher for GCC compiler output.",
        "type": "string",
        "default": "$gcc",
    },
    "problemMatcher.$msCompile": {
        "description": "Problem matcher for Microsoft compiler output.",
        "type": "string",
        "default": "$msCompile",
    },
    "problemMatcher.$tsc": {
        "description": "Problem matcher for TypeScript compiler output.",
        "type": "string",
        "default": "$tsc",
    },
    "problemMatcher.$eslint-stylish": {
        "description": "Problem matcher for ESLint output in stylish format.",
        "type": "string",
        "default": "$eslint-stylish",
    },
}
