import colorama


class TermcolorUtils:
    """
    Colored strings for terminal output -- https://pypi.org/project/colorama/

    Coloring can be switched off globally (e.g. --no-color), in which case every
    helper returns the plain text.
    """

    enabled: bool = True

    @staticmethod
    def set_enabled(enabled: bool) -> None:
        TermcolorUtils.enabled = enabled

    @staticmethod
    def colorize(value: str | int | float, fore_color: str) -> str:
        if TermcolorUtils.enabled is False:
            return str(value)
        text = fore_color + str(value) + colorama.Style.RESET_ALL
        return text

    @staticmethod
    def red(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.RED)

    @staticmethod
    def green(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.GREEN)

    @staticmethod
    def yellow(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.YELLOW)

    @staticmethod
    def cyan(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.CYAN)

    @staticmethod
    def magenta(value: str | int | float) -> str:
        return TermcolorUtils.colorize(value, colorama.Fore.MAGENTA)
