"""GUI constants and configuration."""

# Modern minimal theme - purple accent on clean neutrals
THEME = {
    "bg": "#f5f4f8",              # main window background
    "bg_panel": "#ffffff",        # card / panel surfaces
    "bg_card": "#f0eef5",         # input fields, grid cells
    "border": "#e2dced",          # subtle borders
    "purple": "#6b4c9a",          # primary accent
    "purple_light": "#8b6fbf",    # hover / active
    "purple_dim": "#d4cceb",      # disabled / placeholder
    "text": "#1e1b2e",            # primary text - near black
    "text_secondary": "#5e5875",  # secondary text
    "text_muted": "#928da5",      # muted / hint text
}

TEXT_FILE_TYPES = [("Text files", "*.txt"), ("All files", "*.*")]

# Shown in empty grid cells
PLACEHOLDER_CELL = ""
CELL_WIDTH = 16

EXTRACT_LABEL = "Extract Codes"
EXTRACT_BUSY_LABEL = "Please wait..."
DOWNLOAD_LABEL = "Download Spreadsheet"
