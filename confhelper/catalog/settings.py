"""Documentation for workspace and user settings.json properties."""

ENTRIES = {
    # Editor settings
    "editor.tabSize": {
        "description": "The number of spaces a tab is equal to. This setting is overridden based on the file contents when editor.detectIndentation is true.",
        "type": "number",
        "default": "4",
    },
    "editor.insertSpaces": {
        "description": "Insert spaces when pressing Tab. This setting is overridden based on the file contents when editor.detectIndentation is true.",
        "type": "boolean",
        "default": "true",
    },
    "editor.fontSize": {
        "description": "Controls the font size in pixels.",
        "type": "number",
        "default": "14",
    },
    "editor.fontFamily": {
        "description": "Controls the font family.",
        "type": "string",
        "default": 'Consolas, "Courier New", monospace',
    },
    "editor.fontWeight": {
        "description": "Controls the font weight. Accepts normal and bold keywords or numbers between 1 and 1000.",
        "type": "string|number",
        "default": "normal",
        "enum": ["normal", "bold", "100", "200", "300", "400", "500", "600", "700", "800", "900"],
        "enum_descriptions": {
            "normal": "Normal font weight (equivalent to 400)",
            "bold": "Bold font weight (equivalent to 700)",
            "100": "Thin",
            "200": "Extra Light",
            "300": "Light",
            "400": "Normal",
            "500": "Medium",
            "600": "Semi Bold",
            "700": "Bold",
            "800": "Extra Bold",
            "900": "Black",
        },
    },
    "editor.wordWrap": {
        "description": "Controls how lines should wrap.",
        "type": "string",
        "default": "off",
        "enum": ["off", "on", "wordWrapColumn", "bounded"],
        "enum_descriptions": {
            "off": "Lines will never wrap",
            "on": "Lines will wrap at the viewport width",
            "wordWrapColumn": "Lines will wrap at editor.wordWrapColumn",
            "bounded": "Lines will wrap at min(viewport, editor.wordWrapColumn)",
        },
    },
    "editor.lineNumbers": {
        "description": "Controls the display of line numbers.",
        "type": "string",
        "default": "on",
        "enum": ["off", "on", "relative", "interval"],
        "enum_descriptions": {
            "off": "Line numbers are not rendered",
            "on": "Line numbers are rendered as absolute number",
            "relative": "Line numbers are rendered as distance to cursor line",
            "interval": "Line numbers are rendered every 10 lines",
        },
    },
    "editor.minimap.enabled": {
        "description": "Controls whether the minimap is shown.",
        "type": "boolean",
        "default": "true",
    },
    "editor.minimap.side": {
        "description": "Controls the side where to render the minimap.",
        "type": "string",
        "default": "right",
        "enum": ["left", "right"],
        "enum_descriptions": {
            "left": "Render minimap to left of editor",
            "right": "Render minimap to right of editor",
        },
    },
    "editor.minimap.size": {
        "description": "The size of the minimap.",
        "type": "string",
        "default": "proportional",
        "enum": ["proportional", "fill", "fit"],
        "enum_descriptions": {
            "proportional": "The minimap has the same size as the editor contents (and might scroll)",
            "fill": "The minimap will stretch or shrink as necessary to fill the height of the editor",
            "fit": "The minimap will shrink as necessary to never be larger than the editor",
        },
    },
    "editor.cursorStyle": {
        "description": "Controls the cursor style.",
        "type": "string",
        "default": "line",
        "enum": ["line", "block", "underline", "line-thin", "block-outline", "underline-thin"],
        "enum_descriptions": {
            "line": "A thick vertical line",
            "block": "A filled rectangle",
            "underline": "A thick horizontal line",
            "line-thin": "A thin vertical line",
            "block-outline": "An outlined rectangle",
            "underline-thin": "A thin horizontal line",
        },
    },
    "editor.cursorBlinking": {
        "description": "Control the cursor animation style.",
        "type": "string",
        "default": "blink",
        "enum": ["blink", "smooth", "phase", "expand", "solid"],
        "enum_descriptions": {
            "blink": "Normal blinking",
            "smooth": "Smooth fading",
            "phase": "Blinking with smooth fading",
            "expand": "Cursor expands and contracts",
            "solid": "No blinking",
        },
    },
    "editor.formatOnSave": {
        "description": "Format a file on save. A formatter must be available, the file must not be saved after delay, and the editor must not be shutting down.",
        "type": "boolean",
        "default": "false",
    },
    "editor.formatOnPaste": {
        "description": "Format the line after typing. Requires a formatter to be available.",
        "type": "boolean",
        "default": "false",
    },
    "editor.formatOnType": {
        "description": "Format the line after typing. Requires a formatter to be available.",
        "type": "boolean",
        "default": "false",
    },
    "editor.autoIndent": {
        "description": "Controls whether the editor should automatically adjust the indentation when users type, paste, move or indent lines.",
        "type": "string",
        "default": "full",
        "enum": ["none", "keep", "brackets", "advanced", "full"],
        "enum_descriptions": {
            "none": "The editor will not insert indentation automatically",
            "keep": "The editor will keep the current line indentation",
            "brackets": "The editor will keep the current line indentation and honor language defined brackets",
            "advanced": "The editor will keep the current line indentation, honor language defined brackets and invoke special onEnterRules defined by languages",
            "full": "The editor will keep the current line indentation, honor language defined brackets, invoke special onEnterRules defined by languages, and honor indentationRules defined by languages",
        },
    },
    "editor.bracketPairColorization.enabled": {
        "description": "Controls whether bracket pair colorization is enabled or not. Use workbench.colorCustomizations to override the bracket highlight colors.",
        "type": "boolean",
        "default": "true",
    },
    "editor.suggest.showKeywords": {
        "description": "When enabled IntelliSense shows keyword suggestions.",
        "type": "boolean",
        "default": "true",
    },
    "editor.suggest.showSnippets": {
        "description": "When enabled IntelliSense shows snippet suggestions.",
        "type": "boolean",
        "default": "true",
    },
    "editor.quickSuggestions": {
        "description": "Controls whether suggestions should automatically show up while typing.",
        "type": "boolean|object",
        "default": "true",
    },
    "editor.acceptSuggestionOnCommitCharacter": {
        "description": "Controls whether suggestions should be accepted on commit characters.",
        "type": "boolean",
        "default": "true",
    },
    "editor.acceptSuggestionOnEnter": {
        "description": "Controls whether suggestions should be accepted on Enter, in addition to Tab.",
        "type": "string",
        "default": "on",
        "enum": ["on", "smart", "off"],
        "enum_descriptions": {
            "on": "Accept suggestions on Enter",
            "smart": "Only accept a suggestion with Enter when it makes a textual change",
            "off": "Never accept suggestions on Enter",
        },
    },
    # Files settings
    "files.autoSave": {
        "description": "Controls auto save of dirty editors.",
        "type": "string",
        "default": "off",
        "enum": ["off", "afterDelay", "onFocusChange", "onWindowChange"],
        "enum_descriptions": {
            "off": "An editor with changes is never automatically saved",
            "afterDelay": "An editor with changes is automatically saved after the configured files.autoSaveDelay",
            "onFocusChange": "An editor with changes is automatically saved when the editor loses focus",
            "onWindowChange": "An editor with changes is automatically saved when the window loses focus",
        },
    },
    "files.autoSaveDelay": {
        "description": "Controls the delay in ms after which a dirty editor is saved automatically.",
        "type": "number",
        "default": "1000",
    },
    "files.exclude": {
        "description": "Configure glob patterns for excluding files and folders.",
        "type": "object",
        "default": "{}",
    },
    "files.encoding": {
        "description": "The default character set encoding to use when reading and writing files.",
        "type": "string",
        "default": "utf8",
    },
    "files.eol": {
        "description": "The default end of line character.",
        "type": "string",
        "default": "auto",
        "enum": ["auto", "\n", "\r\n"],
        "enum_descriptions": {
            "auto": "Uses operating system specific end of line character",
            "\n": "LF",
            "\r\n": "CRLF",
        },
    },
    "files.trimTrailingWhitespace": {
        "description": "When enabled, will trim trailing whitespace when saving a file.",
        "type": "boolean",
        "default": "false",
    },
    "files.insertFinalNewline": {
        "description": "When enabled, insert a final new line at the end of the file when saving it.",
        "type": "boolean",
        "default": "false",
    },
    # Workbench settings
    "workbench.colorTheme": {
        "description": "Specifies the color theme used in the workbench.",
        "type": "string",
        "default": "Default Dark+",
    },
    "workbench.iconTheme": {
        "description": "Specifies the icon theme used in the workbench.",
        "type": "string",
        "default": "vs-seti",
    },
    "workbench.startupEditor": {
        "description": "Controls which editor is shown at startup.",
        "type": "string",
        "default": "welcomePage",
        "enum": ["none", "welcomePage", "readme", "newUntitledFile", "welcomePageInEmptyWorkbench"],
        "enum_descriptions": {
            "none": "Start without an editor",
            "welcomePage": "Open the Welcome page",
            "readme": "Open the README when opening a folder that contains one",
            "newUntitledFile": "Open a new untitled file",
            "welcomePageInEmptyWorkbench": "Open the Welcome page when opening an empty workbench",
        },
    },
    "workbench.editor.enablePreview": {
        "description": "Controls whether opened editors show as preview editors.",
        "type": "boolean",
        "default": "true",
    },
    "workbench.editor.showTabs": {
        "description": "Controls whether opened editors should show in tabs or not.",
        "type": "boolean",
        "default": "true",
    },
    "workbench.editor.tabCloseButton": {
        "description": "Controls the position of the editor tabs close buttons, or disables them when set to off.",
        "type": "string",
        "default": "right",
        "enum": ["left", "right", "off"],
        "enum_descriptions": {
            "left": "Tab close button on the left of the tab",
            "right": "Tab close button on the right of the tab",
            "off": "Tab close button is disabled",
        },
    },
    "workbench.activityBar.visible": {
        "description": "Controls the visibility of the activity bar in the workbench.",
        "type": "boolean",
        "default": "true",
    },
    "workbench.statusBar.visible": {
        "description": "Controls the visibility of the status bar at the bottom of the workbench.",
        "type": "boolean",
        "default": "true",
    },
    "workbench.sideBar.location": {
        "description": "Controls the location of the sidebar and activity bar.",
        "type": "string",
        "default": "left",
        "enum": ["left", "right"],
        "enum_descriptions": {
            "left": "Positions the sidebar and activity bar on the left",
            "right": "Positions the sidebar and activity bar on the right",
        },
    },
    # Terminal settings
    "terminal.integrated.shell.windows": {
        "description": "The path of the shell that the terminal uses on Windows.",
        "type": "string",
        "default": "C:\\Windows\\System32\\cmd.exe",
    },
    "terminal.integrated.shell.osx": {
        "description": "The path of the shell that the terminal uses on macOS.",
        "type": "string",
        "default": "/bin/bash",
    },
    "terminal.integrated.shell.linux": {
        "description": "The path of the shell that the terminal uses on Linux.",
        "type": "string",
        "default": "/bin/bash",
    },
    "terminal.integrated.fontSize": {
        "description": "Controls the font size in pixels of the terminal.",
        "type": "number",
        "default": "14",
    },
    "terminal.integrated.fontFamily": {
        "description": "Controls the font family of the terminal.",
        "type": "string",
        "default": 'Consolas, "Courier New", monospace',
    },
    # Git settings
    "git.enabled": {
        "description": "Whether git is enabled.",
        "type": "boolean",
        "default": "true",
    },
    "git.autofetch": {
        "description": "Whether auto fetching is enabled.",
        "type": "boolean",
        "default": "false",
    },
    "git.confirmSync": {
        "description": "Confirm before synchronizing git repositories.",
        "type": "boolean",
        "default": "true",
    },
    # Search settings
    "search.exclude": {
        "description": "Configure glob patterns for excluding files and folders in fulltext searches and quick open.",
        "type": "object",
        "default": "{}",
    },
    "search.useGlobalIgnoreFiles": {
        "description": "Controls whether to use global .gitignore and .ignore files when searching for files.",
        "type": "boolean",
        "default": "false",
    },
    # Settings.json - workspace behavior
    "workbench.editor.wrapTabs": {
        "description": "Controls whether tabs should wrap when the available space is exceeded.",
        "type": "boolean",
        "default": "false",
    },
    "workbench.editor.decorations.badges": {
        "description": "Controls whether editor file decorations should use badges.",
        "type": "boolean",
        "default": "true",
    },
    "workbench.editor.decorations.colors": {
        "description": "Controls whether editor file decorations should use colors.",
        "type": "boolean",
        "default": "true",
    },
    "workbench.tree.indent": {
        "description": "Controls tree indentation in pixels.",
        "type": "number",
        "default": "8",
    },
    "workbench.tree.renderIndentGuides": {
        "description": "Controls whether the tree should render indent guides.",
        "type": "string",
        "default": "onHover",
        "enum": ["none", "onHover", "always"],
        "enum_descriptions": {
            "none": "No indent guides",
            "onHover": "Indent guides on hover",
            "always": "Always show indent guides",
        },
    },
    # Explorer settings
    "explorer.confirmDelete": {
        "description": "Controls whether the explorer should ask for confirmation when deleting a file via the trash.",
        "type": "boolean",
        "default": "true",
    },
    "explorer.confirmDragAndDrop": {
        "description": "Controls whether the explorer should ask for confirmation when moving files via drag and drop.",
        "type": "boolean",
        "default": "true",
    },
    "explorer.enableDragAndDrop": {
        "description": "Controls whether the explorer allows to move files and folders via drag and drop.",
        "type": "boolean",
        "default": "true",
    },
    "explorer.openEditors.visible": {
        "description": "Number of editors shown in the Open Editors pane.",
        "type": "number",
        "default": "9",
    },
    "explorer.autoReveal": {
        "description": "Controls whether the explorer should automatically reveal and select files when opening them.",
        "type": "boolean|string",
        "default": "true",
        "enum": ["true", "false", "focusNoScroll"],
        "enum_descriptions": {
            "true": "Files will be revealed and selected",
            "false": "Files will not be revealed and selected",
            "focusNoScroll": "Files will be revealed and selected only when focus moves to the explorer",
        },
    },
    # Debug settings
    "debug.allowBreakpointsEverywhere": {
        "description": "Controls whether to allow setting breakpoints in any file.",
        "type": "boolean",
        "default": "false",
    },
    "debug.inlineValues": {
        "description": "Controls whether to show inline values in the editor while debugging.",
        "type": "boolean",
        "default": "false",
    },
    "debug.toolBarLocation": {
        "description": "Controls the location of the debug toolbar.",
        "type": "string",
        "default": "floating",
        "enum": ["floating", "docked", "hidden"],
        "enum_descriptions": {
            "floating": "Show debug toolbar in floating mode",
            "docked": "Show debug toolbar docked in the debug viewlet",
            "hidden": "Hide debug toolbar",
        },
    },
    "debug.console.fontSize": {
        "description": "Controls the font size in pixels in the debug console.",
        "type": "number",
        "default": "14",
    },
    "debug.console.lineHeight": {
        "description": "Controls the line height in the debug console.",
        "type": "number",
        "default": "1.4",
    },
    # Language specific settings
    "[javascript]": {
        "description": "Language specific editor settings for JavaScript.",
        "type": "object",
        "default": "{}",
    },
    "[typescript]": {
        "description": "Language specific editor settings for TypeScript.",
        "type": "object",
        "default": "{}",
    },
    "[json]": {
        "description": "Language specific editor settings for JSON.",
        "type": "object",
        "default": "{}",
    },
    "[html]": {
        "description": "Language specific editor settings for HTML.",
        "type": "object",
        "default": "{}",
    },
    "[css]": {
        "description": "Language specific editor settings for CSS.",
        "type": "object",
        "default": "{}",
    },
    "[python]": {
        "description": "Language specific editor settings for Python.",
        "type": "object",
        "default": "{}",
    },
    "[markdown]": {
        "description": "Language specific editor settings for Markdown.",
        "type": "object",
        "default": "{}",
    },
    # Extension specific settings
    "eslint.enable": {
        "description": "Controls whether eslint is enabled or not.",
        "type": "boolean",
        "default": "true",
    },
    "eslint.workingDirectories": {
        "description": "Specifies how the working directories ESLint is using are computed.",
        "type": "array",
        "default": "[]",
    },
    "prettier.enable": {
        "description": "Whether to enable prettier.",
        "type": "boolean",
        "default": "true",
    },
    "prettier.requireConfig": {
        "description": "Require a prettier configuration file to format.",
        "type": "boolean",
        "default": "false",
    },
    "emmet.includeLanguages": {
        "description": "Enable Emmet abbreviations in languages that are not supported by default.",
        "type": "object",
        "default": "{}",
    },
    "liveServer.settings.port": {
        "description": "Set Custom Port Number of Live Server.",
        "type": "number",
        "default": "5500",
    },
    "java.home": {
        "description": "Specifies the folder path to the JDK.",
        "type": "string",
        "default": "",
    },
    "python.defaultInterpreterPath": {
        "description": "Path to default Python interpreter.",
        "type": "string",
        "default": "python",
    },
    "python.linting.enabled": {
        "description": "Whether to enable linting of Python files.",
        "type": "boolean",
        "default": "true",
    },
    "go.gopath": {
        "description": "Specifies the GOPATH to use when no environment variable is set.",
        "type": "string",
        "default": "",
    },
    "go.goroot": {
        "description": "Specifies the GOROOT to use when finding the Go binary.",
        "type": "string",
        "default": "",
    },
}
