# -*- coding: utf-8 -*-
"""
components.py - Custom UI components with terminal styling
Reusable widgets for the snippet window
"""

import customtkinter as ctk
from typing import Callable
from .theme import theme, get_toast_color


class TerminalLog(ctk.CTkTextbox):
    """Terminal-style log display widget"""

    def __init__(self, master, max_lines: int = 500, **kwargs):
        super().__init__(
            master,
            fg_color=theme.bg_dark,
            text_color=theme.accent_green,
            font=(theme.font_mono, theme.font_size_normal),
            border_width=1,
            border_color=theme.border_default,
            corner_radius=theme.corner_radius,
            **kwargs
        )
        self.configure(state="disabled")
        self._line_count = 0
        self._max_lines = max_lines

    def append(self, text: str):
        """Append a line, trimming the oldest past the limit"""
        self.configure(state="normal")
        if self._line_count > 0:
            self.insert("end", "\n")
        self.insert("end", f"{theme.prompt_symbol} {text}")
        self._line_count += 1

        if self._line_count > self._max_lines:
            self.delete("1.0", "2.0")
            self._line_count -= 1

        self.configure(state="disabled")
        self.see("end")

    def clear(self):
        self.configure(state="normal")
        self.delete("1.0", "end")
        self._line_count = 0
        self.configure(state="disabled")


class GlowButton(ctk.CTkButton):
    """Outlined neon button"""

    def __init__(self, master, text: str, accent: str = None, **kwargs):
        accent = accent or theme.accent_green
        super().__init__(
            master,
            text=text,
            font=(theme.font_mono, theme.font_size_normal, "bold"),
            fg_color="transparent",
            hover_color=theme.bg_hover,
            border_width=1,
            border_color=accent,
            text_color=accent,
            corner_radius=theme.corner_radius,
            **kwargs
        )


class SnippetCard(ctk.CTkFrame):
    """Row in the snippet list: name, copy and select"""

    def __init__(self, master, name: str, selected: bool = False,
                 on_copy: Callable[[], None] = None, on_select: Callable[[], None] = None,
                 copy_enabled: bool = True, **kwargs):
        super().__init__(
            master,
            fg_color=theme.bg_selected if selected else theme.bg_light,
            border_width=1,
            border_color=theme.border_active if selected else theme.border_default,
            corner_radius=theme.corner_radius,
            **kwargs
        )

        label = ctk.CTkLabel(
            self,
            text=name or "(unnamed)",
            font=(theme.font_mono, theme.font_size_normal),
            text_color=theme.text_primary if name else theme.text_muted,
            anchor="w"
        )
        label.pack(side="left", fill="x", expand=True, padx=10, pady=6)

        if on_select:
            label.bind("<Button-1>", lambda _e: on_select())
            self.bind("<Button-1>", lambda _e: on_select())

        self.copy_button = None
        if on_copy:
            self.copy_button = GlowButton(
                self, text="COPY", width=60, height=24,
                command=on_copy,
                state="normal" if copy_enabled else "disabled"
            )
            self.copy_button.pack(side="right", padx=(5, 10), pady=6)

    def set_copy_enabled(self, enabled: bool):
        if self.copy_button is not None:
            self.copy_button.configure(state="normal" if enabled else "disabled")


class ToastBanner(ctk.CTkFrame):
    """Rendered notification with optional action and close buttons"""

    def __init__(self, master, style: str, title: str, message: str,
                 button_title: str = None, on_button: Callable[[], None] = None,
                 on_close: Callable[[], None] = None, **kwargs):
        color = get_toast_color(style)
        super().__init__(
            master,
            fg_color=theme.bg_light,
            border_width=1,
            border_color=color,
            corner_radius=theme.corner_radius,
            **kwargs
        )

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=10, pady=(8, 2))

        ctk.CTkLabel(
            header,
            text=f"[{style.upper()}] {title}",
            font=(theme.font_mono, theme.font_size_normal, "bold"),
            text_color=color
        ).pack(side="left")

        if on_close:
            GlowButton(
                header, text="✖", width=28, height=22,
                accent=theme.text_secondary, command=on_close
            ).pack(side="right")

        ctk.CTkLabel(
            self,
            text=message,
            font=(theme.font_mono, theme.font_size_small),
            text_color=theme.text_primary,
            anchor="w",
            justify="left",
            wraplength=theme.toast_width
        ).pack(fill="x", padx=10, pady=(0, 6))

        if button_title and on_button:
            GlowButton(
                self, text=button_title, width=100, height=26,
                accent=color, command=on_button
            ).pack(anchor="w", padx=10, pady=(0, 8))


class AboutWindow(ctk.CTkToplevel):
    """Small window with the app name, version and credits"""

    def __init__(self, master, title: str, text: str, **kwargs):
        super().__init__(master, **kwargs)
        self.title(title)
        self.geometry("420x300")
        self.resizable(False, False)
        self.configure(fg_color=theme.bg_dark)
        self.transient(master)

        ctk.CTkLabel(
            self,
            text=title,
            font=(theme.font_mono, theme.font_size_large, "bold"),
            text_color=theme.accent_green
        ).pack(anchor="w", padx=20, pady=(20, 10))

        ctk.CTkLabel(
            self,
            text=text,
            font=(theme.font_mono, theme.font_size_small),
            text_color=theme.text_primary,
            anchor="w",
            justify="left"
        ).pack(fill="both", expand=True, padx=20)

        GlowButton(
            self, text="OK", width=80,
            command=self.destroy
        ).pack(anchor="e", padx=20, pady=(10, 20))
