import pytest

from tictactoe.utils.termcolor_utils import TermcolorUtils


@pytest.fixture(autouse=True)
def restore_colors():
    # --no-color switches colors off globally, don't leak it between tests
    yield
    TermcolorUtils.set_enabled(True)
