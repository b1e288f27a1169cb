"""Documentation for launch.json debug configuration properties."""

ENTRIES = {
    # Launch.json specific
    "name": {
        "description": "Name of the configuration; appears in the launch configuration dropdown menu.",
        "type": "string",
        "default": "Launch Program",
    },
    "type": {
        "description": "Type of configuration launcher to use.",
        "type": "string",
        "default": "node",
        "enum": ["node", "chrome", "extensionHost", "python", "go", "java", "php", "ruby", "lldb", "cppdbg", "coreclr"],
        "enum_descriptions": {
            "node": "For debugging Node.js applications",
            "chrome": "For debugging web applications in Chrome",
            "extensionHost": "For debugging VS Code extensions",
            "python": "For debugging Python applications",
            "go": "For debugging Go applications",
            "java": "For debugging Java applications",
            "php": "For debugging PHP applications",
            "ruby": "For debugging Ruby applications",
            "lldb": "For debugging C/C++/Objective-C applications with LLDB",
            "cppdbg": "For debugging C/C++ applications with GDB/LLDB",
            "coreclr": "For debugging .NET Core applications",
        },
    },
    "request": {
        "description": "Request type of the configuration.",
        "type": "string",
        "default": "launch",
        "enum": ["launch", "attach"],
        "enum_descriptions": {
            "launch": "Launch a new instance of the program",
            "attach": "Attach to an already running instance",
        },
    },
    "program": {
        "description": "Absolute path to the program.",
        "type": "string",
        "default": "${workspaceFolder}/app.js",
    },
    "args": {
        "description": "Command line arguments passed to the program.",
        "type": "array",
        "default": "[]",
    },
    "cwd": {
        "description": "Absolute path to the working directory of the program being debugged.",
        "type": "string",
        "default": "${workspaceFolder}",
    },
    "env": {
        "description": "Environment variables passed to the program.",
        "type": "object",
        "default": "{}",
    },
    "envFile": {
        "description": "Absolute path to a file containing environment variable definitions.",
        "type": "string",
        "default": "${workspaceFolder}/.env",
    },
    "console": {
        "description": "Where to launch the debug target.",
        "type": "string",
        "default": "integratedTerminal",
        "enum": ["internalConsole", "integratedTerminal", "externalTerminal"],
        "enum_descriptions": {
            "internalConsole": "VS Code Debug Console (which doesn't support to read from stdin)",
            "integratedTerminal": "VS Code's integrated terminal",
            "externalTerminal": "External terminal that can be configured via user settings",
        },
    },
    "port": {
        "description": "Debug port to attach to.",
        "type": "number",
        "default": "9229",
    },
    "address": {
        "description": "TCP/IP address of debug port.",
        "type": "string",
        "default": "localhost",
    },
    "skipFiles": {
        "description": "An array of glob patterns to skip when debugging.",
        "type": "array",
        "default": "[]",
    },
    "stopOnEntry": {
        "description": "Automatically stop after launch.",
        "type": "boolean",
        "default": "false",
    },
    "restart": {
        "description": "Restart session on termination.",
        "type": "boolean",
        "default": "false",
    },
    "timeout": {
        "description": "Retry for this number of milliseconds to connect to the debug adapter.",
        "type": "number",
        "default": "10000",
    },
    "sourceMaps": {
        "description": "Use JavaScript source maps (if they exist).",
        "type": "boolean",
        "default": "true",
    },
    "outFiles": {
        "description": "If source maps are enabled, these glob patterns specify the generated JavaScript files.",
        "type": "array",
        "default": "[]",
    },
    "smartStep": {
        "description": "Automatically step through generated code that cannot be mapped back to the original source.",
        "type": "boolean",
        "default": "true",
    },
    "version": {
        "description": "Version of the debug configuration format.",
        "type": "string",
        "default": "0.2.0",
    },
    "configurations": {
        "description": "List of configurations. Each configuration is a separate debug session.",
        "type": "array",
        "default": "[]",
    },
    "compounds": {
        "description": "List of compound configurations that are collections of configurations.",
        "type": "array",
        "default": "[]",
    },
    "preLaunchTask": {
        "description": "Task to run before the session starts.",
        "type": "string",
        "default": "",
    },
    "postDebugTask": {
        "description": "Task to run after the session ends.",
        "type": "string",
        "default": "",
    },
    "internalConsoleOptions": {
        "description": "Controls behavior of the internal debug console.",
        "type": "string",
        "default": "openOnFirstSessionStart",
        "enum": ["neverOpen", "openOnSessionStart", "openOnFirstSessionStart"],
        "enum_descriptions": {
            "neverOpen": "Never open the internal debug console",
            "openOnSessionStart": "Open the internal debug console on every session start",
            "openOnFirstSessionStart": "Open the internal debug console on the first session start",
        },
    },
    # Python specific debug settings
    "python": {
        "description": "Absolute path to python executable.",
        "type": "string",
        "default": "python",
    },
    "module": {
        "description": "Name of the module to be debugged.",
        "type": "string",
        "default": "",
    },
    "django": {
        "description": "Whether to enable Django debugging.",
        "type": "boolean",
        "default": "false",
    },
    "flask": {
        "description": "Whether to enable Flask debugging.",
        "type": "boolean",
        "default": "false",
    },
    "pyramid": {
        "description": "Whether to enable Pyramid debugging.",
        "type": "boolean",
        "default": "false",
    },
    "jinja": {
        "description": "Whether to enable Jinja2 template debugging.",
        "type": "boolean",
        "default": "true",
    },
    # Chrome specific debug settings
    "url": {
        "description": "Will search for a tab with this exact url and attach to it, if found.",
        "type": "string",
        "default": "http://localhost:8080",
    },
    "webRoot": {
        "description": "This specifies the workspace absolute path to the webserver root.",
        "type": "string",
        "default": "${workspaceFolder}",
    },
    "file": {
        "description": "A local html file to open in the browser.",
        "type": "string",
        "default": "${workspaceFolder}/index.html",
    },
    "userDataDir": {
        "description": "When set, Chrome is launched with a custom user profile stored in this location.",
        "type": "string",
        "default": "${workspaceFolder}/.vscode/chrome",
    },
    "runtimeExecutable": {
        "description": "Workspace relative or absolute path to the runtime executable to be used.",
        "type": "string",
        "default": "stable",
    },
    "runtimeArgs": {
        "description": "Optional arguments passed to the runtime executable.",
        "type": "array",
        "default": "[]",
    },
    # Additional launch.json properties for different debugger types
    "pathMappings": {
        "description": "A list of mappings from a local path to a remote path for debugging remote applications.",
        "type": "array",
        "default": "[]",
    },
    "protocol": {
        "description": "Protocol to use for connecting to the debug adapter.",
        "type": "string",
        "default": "inspector",
        "enum": ["inspector", "legacy"],
        "enum_descriptions": {
            "inspector": "Use the Inspector Protocol",
            "legacy": "Use the legacy V8 Debugger Protocol",
        },
    },
    "remoteRoot": {
        "description": "Remote directory containing the source code being debugged.",
        "type": "string",
        "default": "",
    },
    "localRoot": {
        "description": "Local directory containing the source code being debugged.",
        "type": "string",
        "default": "${workspaceFolder}",
    },
    "trace": {
        "description": "Enable logging of the Debug Adapter Protocol.",
        "type": "boolean|string",
        "default": "false",
        "enum": ["false", "true", "all", "verbose"],
        "enum_descriptions": {
            "false": "No logging",
            "true": "Basic logging",
            "all": "Log all Debug Adapter Protocol traffic",
            "verbose": "Verbose logging with full message content",
        },
    },
    "outputCapture": {
        "description": "From where to capture output messages.",
        "type": "string",
        "default": "console",
        "enum": ["console", "std"],
        "enum_descriptions": {
            "console": "Capture output from Debug Console",
            "std": "Capture output from stdout/stderr",
        },
    },
    "breakOnLoad": {
        "description": "Automatically insert a breakpoint at the first line of the program.",
        "type": "boolean",
        "default": "false",
    },
    "enableBreakpointsFor": {
        "description": "Allows breakpoints to be set in files with these extensions.",
        "type": "array",
        "default": "[]",
    },
    # Node.js specific launch properties
    "runtimeVersion": {
        "description": "Version of Node.js runtime to use.",
        "type": "string",
        "default": "default",
    },
    "autoAttachChildProcesses": {
        "description": "Automatically attach to spawned subprocesses.",
        "type": "boolean",
        "default": "true",
    },
    "killBehavior": {
        "description": "Configures how debug processes are killed when stopping the session.",
        "type": "string",
        "default": "forceful",
        "enum": ["polite", "forceful"],
        "enum_descriptions": {
            "polite": "Send SIGTERM to allow graceful shutdown",
            "forceful": "Send SIGKILL to force immediate termination",
        },
    },
    "resolveSourceMapLocations": {
        "description": "A list of minimatch patterns for locations where source maps can be used.",
        "type": "array",
        "default": '["**", "!**/node_modules/**"]',
    },
    "cascadeTerminateToConfigurations": {
        "description": "A list of debug session names that will also be terminated when this debug session terminates.",
        "type": "array",
        "default": "[]",
    },
    # Python debugging specific
    "pythonPath": {
        "description": "Path to the Python interpreter.",
        "type": "string",
        "default": "python",
    },
    "justMyCode": {
        "description": "Debug only user-written code.",
        "type": "boolean",
        "default": "true",
    },
    "subProcess": {
        "description": "Enable debugging of subprocesses.",
        "type": "boolean",
        "default": "false",
    },
    "redirectOutput": {
        "description": "Redirect output to the debug console.",
        "type": "boolean",
        "default": "true",
    },
    "showReturnValue": {
        "description": "Show return values in the debug console.",
        "type": "boolean",
        "default": "true",
    },
    "gevent": {
        "description": "Enable debugging support for gevent.",
        "type": "boolean",
        "default": "false",
    },
    # C/C++ debugging specific
    "miDebuggerPath": {
        "description": "Path to the MI debugger (GDB or LLDB).",
        "type": "string",
        "default": "gdb",
    },
    "miDebuggerArgs": {
        "description": "Additional arguments for the MI debugger.",
        "type": "string",
        "default": "",
    },
    "targetArchitecture": {
        "description": "Architecture of the debuggee.",
        "type": "string",
        "default": "x64",
        "enum": ["x86", "x64", "arm", "arm64"],
        "enum_descriptions": {
            "x86": "32-bit x86 architecture",
            "x64": "64-bit x86 architecture",
            "arm": "ARM architecture",
            "arm64": "64-bit ARM architecture",
        },
    },
    "setupCommands": {
        "description": "One or more GDB/LLDB commands to execute in order to set up the underlying debugger.",
        "type": "array",
        "default": "[]",
    },
    "customLaunchSetupCommands": {
        "description": "Commands to execute when launching a program.",
        "type": "array",
        "default": "[]",
    },
    "launchCompleteCommand": {
        "description": "Command to execute after the debugger is fully set up.",
        "type": "string",
        "default": "exec-run",
        "enum": ["exec-run", "exec-continue", "None"],
        "enum_descriptions": {
            "exec-run": "Run the program",
            "exec-continue": "Continue execution",
            "None": "Do not execute any command",
        },
    },
    # Chrome/Browser debugging specific
    "urlFilter": {
        "description": "Will search for a page with this url and attach to it.",
        "type": "string",
        "default": "",
    },
    "includeDefaultArgs": {
        "description": "Whether default browser launching args should be included.",
        "type": "boolean",
        "default": "true",
    },
    "disableNetworkCache": {
        "description": "Controls whether to skip the network cache for each request.",
        "type": "boolean",
        "default": "false",
    },
    "showAsyncStacks": {
        "description": "Show async stacks in the call stack.",
        "type": "boolean",
        "default": "true",
    },
    "breakOnLoadStrategy": {
        "description": "Strategy for setting breakpoints.",
        "type": "string",
        "default": "instrument",
        "enum": ["instrument", "regex"],
        "enum_descriptions": {
            "instrument": "Use source map instrumentation for breakpoints",
            "regex": "Use regex matching for breakpoint locations",
        },
    },
    "browser.smartStep": {
        "description": "Try to automatically step over code that doesn't map to source files.",
        "type": "boolean",
        "default": "true",
    },
    "browser.skipFiles": {
        "description": "Skip these files when stepping.",
        "type": "array",
        "default": "[]",
    },
}
