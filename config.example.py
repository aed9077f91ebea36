# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKGRID_APP_NAME": "Page title (default: taskgrid).",
    "TASKGRID_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TASKGRID_DATA_DIR": "Where taskgrid.log is written (default: .local/taskgrid).",
    # Remote todo source
    "TASKGRID_TODOS_URL": "Todo list endpoint (default: https://jsonplaceholder.typicode.com/todos).",
    "TASKGRID_FETCH_CONNECT_TIMEOUT": "Connect timeout in seconds (default: 5).",
    "TASKGRID_FETCH_READ_TIMEOUT": "Read timeout in seconds (default: 15).",
    "TASKGRID_OFFLINE": "Use built-in sample todos instead of the network (true/false).",
    # UI
    "TASKGRID_NOTIFY_TTL_MS": "How long a notification stays on the page, in ms (default: 1000).",
    "TASKGRID_PAGE_SIZE": "Grid rows per page (default: 20).",
    "TASKGRID_CLEAR_SCREEN": "Clear the terminal before each redraw (true/false, default: true).",
    # Colors (read by the theme, not by Settings)
    "NO_COLOR": "Disable ANSI colors.",
    "FORCE_COLOR": "Force ANSI colors even when stdout is not a TTY.",
}
