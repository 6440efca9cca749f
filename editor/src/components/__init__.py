"""UI components for the Ellipse Transform Editor

This package contains the Qt-side pieces:
- ellipse_canvas: Drawing surface that feeds pointer events to the controller
- transform_widgets: Handle painters and edit modes
"""
