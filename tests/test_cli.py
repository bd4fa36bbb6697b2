import logging

import pytest

from avatarlink.config import config
from avatarlink.scripts import cli

pytestmark = pytest.mark.usefixtures("app_logger")

HOLLLO_EMAIL = "helllo@holllo.cc"
HOLLLO_HASH = "ebff9105dce4954b1bdb57fdab079ff3"


def test_cli_prints_url(clean_config: None, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["url", HOLLLO_EMAIL]) == 0
    output = capsys.readouterr().out.strip()
    assert output == f"https://www.gravatar.com/avatar/{HOLLLO_HASH}"


def test_cli_prints_hash(
    clean_config: None, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["hash", "  HELLLO@holllo.cc "]) == 0
    assert capsys.readouterr().out.strip() == HOLLLO_HASH


def test_cli_url_with_options(
    clean_config: None, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main(
        [
            "url",
            HOLLLO_EMAIL,
            "--host",
            "cdn.libravatar.org",
            "--size",
            "2048",
            "--rating",
            "pg",
            "--default",
            "https://example.com/a b.png",
            "--force-default",
            "--extension",
            ".jpg",
        ]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        f"https://cdn.libravatar.org/avatar/{HOLLLO_HASH}.jpg"
        "?default=https%3A%2F%2Fexample.com%2Fa%20b.png&rating=pg&size=2048"
        "&forcedefault=y"
    )


def test_cli_falls_back_to_configuration(
    clean_config: None, capsys: pytest.CaptureFixture[str]
) -> None:
    config.BASE_URL = "https://avatars.example.org/"
    config.DEFAULT_IMAGE = "identicon"
    config.SIZE = 80

    assert cli.main(["url", HOLLLO_EMAIL, "--size", "40"]) == 0
    assert capsys.readouterr().out.strip() == (
        f"https://avatars.example.org/{HOLLLO_HASH}?default=identicon&size=40"
    )


def test_cli_base_url_flag(
    clean_config: None, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["url", HOLLLO_EMAIL, "--base-url", "https://x.test/a/"]) == 0
    assert capsys.readouterr().out.strip() == f"https://x.test/a/{HOLLLO_HASH}"


@pytest.mark.parametrize("size", ["0", "2049"])
def test_cli_rejects_out_of_range_size(
    clean_config: None, capsys: pytest.CaptureFixture[str], size: str
) -> None:
    assert cli.main(["url", HOLLLO_EMAIL, "--size", size]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "size" in captured.err


def test_cli_host_and_base_url_are_exclusive(clean_config: None) -> None:
    with pytest.raises(SystemExit):
        cli.main(["url", HOLLLO_EMAIL, "--host", "a", "--base-url", "b"])


def test_cli_debug_enables_debug_logging(
    clean_config: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert cli.main(["--debug", "hash", HOLLLO_EMAIL]) == 0
    assert logging.getLogger("avatarlink").level == logging.DEBUG


def test_cli_rejects_non_numeric_configured_size(
    clean_config: None, capsys: pytest.CaptureFixture[str]
) -> None:
    config.SIZE = "large"

    assert cli.main(["url", HOLLLO_EMAIL]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "must be an integer" in captured.err
