import customtkinter as ctk

from logger import get_logger
from models.screen import PLACEHOLDER_SCREENS, Screen
from services.expense_service import ExpenseService
from services.navigation_service import EmptyStackError, NavigationController
from ui.components.alert_banner import AlertBanner
from ui.screens.expense_list_screen import ExpenseListScreen
from ui.screens.home_screen import HomeScreen
from ui.screens.login_screen import LoginScreen
from ui.screens.placeholder_screen import PlaceholderScreen
from ui.screens.register_screen import RegisterScreen
from utils.constants import APP_HEIGHT, APP_NAME, APP_WIDTH

logger = get_logger()


class AppWindow(ctk.CTk):
    """Top-level window; renders whatever screen the navigator has on top."""

    def __init__(
        self,
        navigator: NavigationController,
        expense_service: ExpenseService,
        currency_symbol: str,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._nav = navigator
        self._expense_svc = expense_service
        self._currency_symbol = currency_symbol
        self._screen_frame: ctk.CTkFrame | None = None

        self.title(APP_NAME)
        self.minsize(360, 560)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=0, column=0, sticky="ew", padx=8)

        self._nav.add_listener(self._on_navigate)
        self.bind("<Escape>", lambda _e: self.go_back())
        self._render(self._nav.current)

    def destroy(self):
        self._nav.remove_listener(self._on_navigate)
        super().destroy()

    # ── Navigation ───────────────────────────────────────────────────────────
    def go_back(self):
        try:
            self._nav.pop()
        except EmptyStackError:
            logger.debug("Back ignored on root screen %s", self._nav.current.name)

    def _on_navigate(self, screen: Screen):
        self._clear_banners()
        self._render(screen)

    def _render(self, screen: Screen):
        if self._screen_frame is not None:
            self._screen_frame.destroy()
        self._screen_frame = self._build_screen(screen)
        self._screen_frame.grid(row=1, column=0, sticky="nsew")
        self.title(f"{APP_NAME} - {screen.title}")

    def _build_screen(self, screen: Screen) -> ctk.CTkFrame:
        if screen is Screen.LOGIN:
            return LoginScreen(self, navigator=self._nav)
        if screen is Screen.REGISTER:
            return RegisterScreen(
                self, navigator=self._nav,
                show_banner=self.show_banner, go_back=self.go_back,
            )
        if screen is Screen.HOME:
            return HomeScreen(self, navigator=self._nav)
        if screen is Screen.EXPENSE_LIST:
            return ExpenseListScreen(
                self,
                expense_service=self._expense_svc,
                go_back=self.go_back,
                show_banner=self.show_banner,
                currency_symbol=self._currency_symbol,
            )
        if screen in PLACEHOLDER_SCREENS:
            return PlaceholderScreen(self, screen=screen, go_back=self.go_back)
        raise ValueError(f"No view registered for {screen!r}")

    # ── Banners ──────────────────────────────────────────────────────────────
    def show_banner(self, message: str, color: str | None = None):
        self._clear_banners()
        kwargs = {"color": color} if color else {}
        AlertBanner(self._banner_frame, message=message, **kwargs).pack(fill="x", pady=2)

    def _clear_banners(self):
        for w in self._banner_frame.winfo_children():
            w.destroy()
