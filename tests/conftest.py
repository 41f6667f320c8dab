import pytest

from tests.logging_utils import preserved_root_handlers
from tests.word_lists import SENSITIVE_WORDS


@pytest.fixture
def words_file(tmp_path):
    """A UTF-8 word list with a comment and a blank line."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# sensitive words\n" + "\n".join(SENSITIVE_WORDS) + "\n\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_file(tmp_path, words_file):
    """A complete configuration pointing at `words_file`."""
    path = tmp_path / "config.txt"
    path.write_text(
        f"dictionary_path = {words_file}\n"
        "replacement = ***\n"
        "reload_on_query = false\n"
        "log_details = true\n",
        encoding="utf-8",
    )
    return path


@pytest.hookimpl(hookwrapper=True, trylast=True)
def pytest_runtest_call(item):
    # trylast runs inside pytest's log capture wrapper
    with preserved_root_handlers():
        yield
