#!/usr/bin/env python3
"""
Calculator GUI

Dark-themed desk calculator window (Tkinter). The window owns no arithmetic:
every key press (mouse or keyboard) is handed to the InputController as a
Button id, and the returned display text and UI hints are applied here.

- 6x5 keypad laid out from frontend.layout.BUTTON_LABELS.
- Keyboard shortcuts from frontend.layout.BUTTON_SHORTCUTS.
- 'Bin' / 'Hex' hints relabel the toggle key and switch the base the
  display text is rendered in.
"""

import logging
import tkinter as tk
from typing import Dict, Optional

from backend.config import CalculatorConfig
from backend.controller import InputController
from backend.models import Button, ButtonResult, DisplayMode, UiHint
from frontend.layout import BUTTON_LABELS, BUTTON_SHORTCUTS, GRID_COLUMNS, GRID_ROWS, grid_position, render_display

logger = logging.getLogger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 420

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # display panel background
BTN_BG = "#2b2d30"      # button tile background
FG = "#E6EEF3"          # foreground text (light)
ACCENT = "#cfeeff"      # mode indicator

TITLE_FONT = ("Segoe UI", 13, "bold")
DISPLAY_FONT = ("Consolas", 18)


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, config: Optional[CalculatorConfig] = None):
        super().__init__()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(320, 380)
        self.configure(bg=BG)

        self.calc_config = config or CalculatorConfig()
        self.controller = InputController(self.calc_config)

        # Internal state
        self.buttons: Dict[Button, tk.Button] = {}
        self.render_mode = DisplayMode.DECIMAL
        self._raw_text = self.controller.display_text

        self._build_display()
        self._build_keypad()
        self._bind_keys()

        # Toggle keys start with whatever labels the controller reports
        for hint in self.controller.toggle_hints():
            self._apply_hint(hint)
        self._show(self._raw_text)

    # -------------------------
    # Layout
    # -------------------------
    def _build_display(self):
        """Display panel: base indicator on the left, number on the right."""
        disp = tk.Frame(self, bg=PANEL_BG)
        disp.pack(fill="x")

        self.mode_label = tk.Label(disp, text="DEC", bg=PANEL_BG, fg=ACCENT, font=TITLE_FONT)
        self.mode_label.pack(side="left", padx=(8, 4), pady=6)

        self.display_var = tk.StringVar()
        tk.Label(disp, textvariable=self.display_var, bg=PANEL_BG, fg=FG,
                 anchor="e", font=DISPLAY_FONT).pack(fill="x", padx=6, pady=(6, 6))

    def _build_keypad(self):
        """Keypad grid. Tiles are uniform-sized through grid weights."""
        tile_container = tk.Frame(self, bg=PANEL_BG)
        tile_container.pack(fill="both", expand=True, pady=(6, 0))

        for button in Button:
            r, c = grid_position(button)
            btn = tk.Button(tile_container, text=BUTTON_LABELS[button], bg=BTN_BG, fg=FG, relief="flat",
                            command=lambda b=button: self.press(b))
            btn.grid(row=r, column=c, sticky="nsew", padx=4, pady=4)
            self.buttons[button] = btn

        for c in range(GRID_COLUMNS):
            tile_container.grid_columnconfigure(c, weight=1)
        for r in range(GRID_ROWS):
            tile_container.grid_rowconfigure(r, weight=1)

    def _bind_keys(self):
        for sequence, button in BUTTON_SHORTCUTS.items():
            self.bind(sequence, lambda e, b=button: self._on_key(b))

    def _on_key(self, button: Button):
        """Keyboard shortcut handler; returns "break" to stop default Tk behavior."""
        self.press(button)
        return "break"

    # -------------------------
    # Controller plumbing
    # -------------------------
    def press(self, button: Button) -> ButtonResult:
        """Feed one key press to the controller and apply what it returns."""
        result = self.controller.handle_button(button)
        for hint in result.hints:
            self._apply_hint(hint)
        self._raw_text = result.display_text
        self._show(self._raw_text)
        return result

    def _apply_hint(self, hint: UiHint):
        """Relabel the toggle key and switch the base used for the display."""
        btn = self.buttons.get(hint.button)
        if btn is not None:
            btn.configure(text=hint.label)
        self.render_mode = hint.previous_mode
        self.mode_label.configure(text=self.render_mode.value.upper())
        logger.debug("Applied hint %s", hint)

    def _show(self, text: str):
        self.display_var.set(render_display(text, self.render_mode, self.calc_config.max_digits))


# -------------------------
# Run the application
# -------------------------
def main():
    # Create and run the GUI
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
