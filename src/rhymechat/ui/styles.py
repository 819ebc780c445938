"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Widths are relative so a terminal resize reflows the transcript viewport and
the input bar without any code in the event handlers.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - viewport over input
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Transcript Viewport
   ============================================ */
#transcript {
    width: 100%;
    height: 1fr;
    min-height: 5;
    background: $background;
    padding: 0 1;
    scrollbar-gutter: stable;
}

#transcript-content {
    width: 100%;
    height: auto;
}

/* ============================================
   Input Bar
   ============================================ */
#chat-input-bar {
    width: 100%;
    height: 3;
    margin-top: 1;
    padding: 0 1;
}

#input-prompt {
    width: 2;
    height: 100%;
    color: $primary;
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0;
    background: $background;

    &:disabled {
        color: $text-muted;
    }
}

/* ============================================
   Log Panel - hidden until enabled
   ============================================ */
#debug-panel {
    display: none;
    height: auto;
    min-height: 6;
    max-height: 14;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;
    margin-top: 1;
}
"""
