"""
Presentation shell.

Components:
- popover.py: shows/hides the list views and signals teardown
- render.py: text rendering of lists and the status line
- image_picker.py: attachment loading
- commands.py: slash-command registry
- console_connector.py: interactive REPL
"""
