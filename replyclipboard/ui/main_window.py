# -*- coding: utf-8 -*-
"""
main_window.py - Main application window with terminal styling
Snippet list, editor, toasts and logs
"""

import customtkinter as ctk
from typing import Callable, List, Optional

from ..config import APP_DISPLAY_NAME, APP_VERSION, PLACEHOLDER
from ..about import about_text, about_title
from .theme import theme
from .components import TerminalLog, GlowButton, SnippetCard, ToastBanner, AboutWindow


class MainWindow(ctk.CTk):
    """Main application window with tabbed interface"""

    def __init__(
        self,
        on_add: Callable[[], None] = None,
        on_copy: Callable[[str], None] = None,
        on_save: Callable[[str, str, str], None] = None,
        on_delete: Callable[[str], None] = None,
        on_backup: Callable[[], None] = None,
        on_restore: Callable[[], None] = None,
        on_check_updates: Callable[[], None] = None,
        on_about: Callable[[], None] = None,
        on_toast_button: Callable[[str], None] = None,
        on_toast_dismiss: Callable[[str], None] = None,
        always_on_top: bool = False
    ):
        super().__init__()

        # Callbacks
        self._on_add = on_add or (lambda: None)
        self._on_copy = on_copy or (lambda x: None)
        self._on_save = on_save or (lambda i, n, t: None)
        self._on_delete = on_delete or (lambda x: None)
        self._on_backup = on_backup or (lambda: None)
        self._on_restore = on_restore or (lambda: None)
        self._on_check_updates = on_check_updates or (lambda: None)
        self._on_about = on_about or self.show_about
        self._on_toast_button = on_toast_button or (lambda x: None)
        self._on_toast_dismiss = on_toast_dismiss or (lambda x: None)

        # State
        self._selected_id: Optional[str] = None
        self._snippet_cards = []
        self._toast_banners = []
        self._action_buttons = []
        self._blocked = False
        self._about_window = None

        # Window setup
        self.title(APP_DISPLAY_NAME)
        self.geometry("820x600")
        self.minsize(640, 480)
        self.attributes("-topmost", always_on_top)

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("dark-blue")
        self.configure(fg_color=theme.bg_dark)

        # Build UI
        self._create_header()
        self._create_toast_area()
        self._create_tabs()
        self._create_footer()
        self._clear_editor()

    def _create_header(self):
        """Create header with title and toolbar"""
        header = ctk.CTkFrame(self, fg_color=theme.bg_medium, height=60)
        header.pack(fill="x", padx=0, pady=0)
        header.pack_propagate(False)

        ctk.CTkLabel(
            header,
            text="📋 REPLY.CLIPBOARD",
            font=(theme.font_mono, theme.font_size_title, "bold"),
            text_color=theme.accent_green
        ).pack(side="left", padx=20, pady=15)

        toolbar = ctk.CTkFrame(header, fg_color="transparent")
        toolbar.pack(side="right", padx=20)

        for text, accent, command in (
            ("+ ADD", theme.accent_green, self._on_add),
            ("⇪ BACKUP", theme.accent_cyan, self._on_backup),
            ("⇩ RESTORE", theme.accent_orange, self._on_restore),
            ("⟳ UPDATES", theme.accent_purple, self._on_check_updates),
        ):
            button = GlowButton(toolbar, text=text, accent=accent, width=100, command=command)
            button.pack(side="left", padx=(0, 8))
            self._action_buttons.append(button)

        GlowButton(
            toolbar, text="ⓘ ABOUT", accent=theme.text_secondary, width=90,
            command=lambda: self._on_about()
        ).pack(side="left")

    def _create_toast_area(self):
        """Stack of visible notifications"""
        self._toast_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._toast_frame.pack(fill="x", padx=10, pady=(6, 0))

    def _create_tabs(self):
        """Create tabbed interface"""
        self._tabview = ctk.CTkTabview(
            self,
            fg_color=theme.bg_medium,
            segmented_button_fg_color=theme.bg_dark,
            segmented_button_selected_color=theme.accent_green,
            segmented_button_selected_hover_color=theme.accent_green,
            segmented_button_unselected_color=theme.bg_light,
            segmented_button_unselected_hover_color=theme.bg_hover,
            text_color=theme.bg_dark,
            corner_radius=theme.corner_radius
        )
        self._tabview.pack(fill="both", expand=True, padx=10, pady=10)

        self._tabview.add("  SNIPPETS  ")
        self._tabview.add("  LOGS  ")

        self._create_snippets_tab()
        self._create_logs_tab()

    def _create_snippets_tab(self):
        """List on the left, editor on the right"""
        tab = self._tabview.tab("  SNIPPETS  ")

        self._list_frame = ctk.CTkScrollableFrame(
            tab,
            width=280,
            fg_color=theme.bg_dark,
            corner_radius=theme.corner_radius
        )
        self._list_frame.pack(side="left", fill="y", padx=(10, 5), pady=5)

        editor = ctk.CTkFrame(tab, fg_color=theme.bg_light)
        editor.pack(side="left", fill="both", expand=True, padx=(5, 10), pady=5)

        ctk.CTkLabel(
            editor,
            text="NAME:",
            font=(theme.font_mono, theme.font_size_small),
            text_color=theme.text_muted
        ).pack(anchor="w", padx=15, pady=(15, 5))

        self._name_var = ctk.StringVar(value="")
        self._name_entry = ctk.CTkEntry(
            editor,
            textvariable=self._name_var,
            font=(theme.font_mono, theme.font_size_normal),
            fg_color=theme.bg_dark,
            text_color=theme.accent_green,
            border_color=theme.border_default,
            placeholder_text="Enter the name for the item"
        )
        self._name_entry.pack(fill="x", padx=15, pady=(0, 10))

        ctk.CTkLabel(
            editor,
            text=f"TEXT:  ({PLACEHOLDER} is replaced with the clipboard)",
            font=(theme.font_mono, theme.font_size_small),
            text_color=theme.text_muted
        ).pack(anchor="w", padx=15, pady=(0, 5))

        self._text_box = ctk.CTkTextbox(
            editor,
            font=(theme.font_mono, theme.font_size_normal),
            fg_color=theme.bg_dark,
            text_color=theme.text_primary,
            border_width=1,
            border_color=theme.border_default
        )
        self._text_box.pack(fill="both", expand=True, padx=15, pady=(0, 10))

        controls = ctk.CTkFrame(editor, fg_color="transparent")
        controls.pack(fill="x", padx=15, pady=(0, 15))

        self._save_btn = GlowButton(controls, text="✔ SAVE", width=100, command=self._save_selected)
        self._save_btn.pack(side="left", padx=(0, 8))
        self._delete_btn = GlowButton(
            controls, text="🗑 DELETE", width=100,
            accent=theme.accent_red, command=self._delete_selected
        )
        self._delete_btn.pack(side="left", padx=(0, 8))
        self._close_btn = GlowButton(
            controls, text="✖ CLOSE", width=100,
            accent=theme.text_secondary, command=self._clear_editor
        )
        self._close_btn.pack(side="left")
        self._action_buttons.extend([self._save_btn, self._delete_btn, self._close_btn])

    def _create_logs_tab(self):
        """Create logs tab"""
        tab = self._tabview.tab("  LOGS  ")

        header = ctk.CTkFrame(tab, fg_color="transparent")
        header.pack(fill="x", padx=10, pady=10)

        ctk.CTkLabel(
            header,
            text="// SYSTEM LOGS",
            font=(theme.font_mono, theme.font_size_large, "bold"),
            text_color=theme.text_secondary
        ).pack(side="left")

        GlowButton(
            header, text="CLEAR", width=80,
            command=lambda: self._log_display.clear()
        ).pack(side="right")

        self._log_display = TerminalLog(tab)
        self._log_display.pack(fill="both", expand=True, padx=10, pady=5)

    def _create_footer(self):
        """Create footer with version info"""
        footer = ctk.CTkFrame(self, fg_color=theme.bg_medium, height=30)
        footer.pack(fill="x", side="bottom")
        footer.pack_propagate(False)

        ctk.CTkLabel(
            footer,
            text=f"v{APP_VERSION} | Snippets to your clipboard",
            font=(theme.font_mono, theme.font_size_small),
            text_color=theme.text_muted
        ).pack(side="left", padx=15, pady=5)

    # Editor
    def _select(self, snippet):
        """Load a snippet into the editor"""
        if self._blocked:
            return
        self._selected_id = snippet.id
        self._name_var.set(snippet.name)
        self._text_box.delete("1.0", "end")
        self._text_box.insert("1.0", snippet.text)
        for button in (self._save_btn, self._delete_btn, self._close_btn):
            button.configure(state="normal")

    def _clear_editor(self):
        self._selected_id = None
        self._name_var.set("")
        self._text_box.delete("1.0", "end")
        for button in (self._save_btn, self._delete_btn, self._close_btn):
            button.configure(state="disabled")

    def _save_selected(self):
        if self._selected_id:
            # Tk textboxes always end with a newline
            text = self._text_box.get("1.0", "end-1c")
            self._on_save(self._selected_id, self._name_var.get(), text)

    def _delete_selected(self):
        if self._selected_id:
            snippet_id = self._selected_id
            self._clear_editor()
            self._on_delete(snippet_id)

    # Public methods for updating UI state
    def log(self, message: str):
        """Add message to log display"""
        self._log_display.append(message)

    def update_snippets(self, snippets: List):
        """Rebuild the snippet list"""
        for card in self._snippet_cards:
            card.destroy()
        self._snippet_cards.clear()

        ids = set()
        for snippet in snippets:
            ids.add(snippet.id)
            card = SnippetCard(
                self._list_frame,
                name=snippet.name,
                selected=snippet.id == self._selected_id,
                on_copy=lambda i=snippet.id: self._on_copy(i),
                on_select=lambda s=snippet: self._select_and_refresh(s, snippets),
                copy_enabled=not self._blocked
            )
            card.pack(fill="x", padx=5, pady=3)
            self._snippet_cards.append(card)

        if self._selected_id and self._selected_id not in ids:
            self._clear_editor()

    def _select_and_refresh(self, snippet, snippets: List):
        self._select(snippet)
        self.update_snippets(snippets)

    def select_snippet(self, snippet):
        """Open a snippet in the editor, e.g. right after it was added"""
        self._select(snippet)

    def render_notifications(self, notifications: List):
        """Show the queued toasts, newest last"""
        for banner in self._toast_banners:
            banner.destroy()
        self._toast_banners.clear()

        for n in notifications:
            banner = ToastBanner(
                self._toast_frame,
                style=n.style.label,
                title=n.title,
                message=n.message,
                button_title=n.button_title,
                on_button=(lambda i=n.id: self._on_toast_button(i)) if n.on_button else None,
                on_close=None if n.blocking else (lambda i=n.id: self._on_toast_dismiss(i))
            )
            banner.pack(fill="x", pady=(0, 4))
            self._toast_banners.append(banner)

    def set_blocked(self, blocked: bool):
        """Disable every action while a blocking toast is up"""
        if blocked == self._blocked:
            return
        self._blocked = blocked
        for button in self._action_buttons:
            button.configure(state="disabled" if blocked else "normal")
        for card in self._snippet_cards:
            card.set_copy_enabled(not blocked)
        self._clear_editor()

    def show_about(self):
        """Open the About window, or raise it if already open"""
        if self._about_window is not None and self._about_window.winfo_exists():
            self._about_window.lift()
            self._about_window.focus_force()
            return
        self._about_window = AboutWindow(self, title=about_title(), text=about_text())
