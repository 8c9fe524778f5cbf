from enum import Enum


class Screen(Enum):
    LOGIN = "login"
    REGISTER = "register"
    HOME = "home"
    EXPENSE_LIST = "expense_list"
    PROFILE = "profile"
    MESSAGES = "messages"
    SETTINGS = "settings"

    @property
    def title(self) -> str:
        return SCREEN_TITLES[self]


SCREEN_TITLES = {
    Screen.LOGIN: "Login",
    Screen.REGISTER: "Register",
    Screen.HOME: "Home",
    Screen.EXPENSE_LIST: "Expenses",
    Screen.PROFILE: "Profile",
    Screen.MESSAGES: "Messages",
    Screen.SETTINGS: "Settings",
}

# Dashboard features that only render a "coming soon" placeholder
PLACEHOLDER_SCREENS = (Screen.PROFILE, Screen.MESSAGES, Screen.SETTINGS)
