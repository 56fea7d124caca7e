import pytest

from zap import launcher
from zap.config import ZapConfig
from zap.launcher import build_search_url, launch_app, launch_args, run_effect, search_web
from zap.types import HandleKind
from zap.utils.state import LaunchApp, Quit, SearchWeb


@pytest.fixture
def popen_calls(monkeypatch):
    calls = []

    def fake_popen(args, **kwargs):
        calls.append(args)

    monkeypatch.setattr(launcher.subprocess, "Popen", fake_popen)
    return calls


@pytest.fixture
def opened_urls(monkeypatch):
    urls = []
    monkeypatch.setattr(launcher.webbrowser, "open_new_tab", urls.append)
    return urls


def test_app_id_goes_through_apps_folder(make_app):
    entry = make_app("Calculator", handle="Microsoft.WindowsCalculator_8wekyb3d8bbwe!App")
    assert launch_args(entry) == [
        "explorer.exe",
        "shell:AppsFolder\\Microsoft.WindowsCalculator_8wekyb3d8bbwe!App",
    ]


@pytest.mark.parametrize("kind, handle", [
    (HandleKind.INSTALL_DIR, "C:\\Program Files\\7-Zip"),
    (HandleKind.SHORTCUT, "C:\\ProgramData\\Microsoft\\Windows\\Start Menu\\Programs\\Firefox.lnk"),
])
def test_paths_are_opened_by_explorer(make_app, kind, handle):
    assert launch_args(make_app("x", handle=handle, kind=kind)) == ["explorer.exe", handle]


def test_launch_app_spawns_once(make_app, popen_calls):
    launch_app(make_app("Paint", handle="Microsoft.Paint!App"))
    assert popen_calls == [["explorer.exe", "shell:AppsFolder\\Microsoft.Paint!App"]]


def test_spawn_errors_are_ignored(make_app, monkeypatch):
    def broken_popen(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(launcher.subprocess, "Popen", broken_popen)

    launch_app(make_app("Paint"))


def test_build_search_url_encodes_query():
    assert build_search_url("  c++ & rust ", "https://duckduckgo.com/?q=") == \
        "https://duckduckgo.com/?q=c%2B%2B+%26+rust"


def test_search_uses_configured_browser(tmp_path, popen_calls, opened_urls):
    browser = tmp_path / "chrome.exe"
    browser.write_bytes(b"")

    search_web("openai", ZapConfig(browser_path=str(browser)))

    assert popen_calls == [[str(browser), "https://duckduckgo.com/?q=openai"]]
    assert opened_urls == []


def test_search_falls_back_to_default_browser(tmp_path, monkeypatch, popen_calls, opened_urls):
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))

    search_web("openai", ZapConfig(search_url="https://example.org/search?q="))

    assert popen_calls == []
    assert opened_urls == ["https://example.org/search?q=openai"]


def test_blank_search_does_nothing(popen_calls, opened_urls):
    search_web("   ", ZapConfig())
    assert popen_calls == []
    assert opened_urls == []


def test_default_browser_path(monkeypatch):
    monkeypatch.setenv("LOCALAPPDATA", "C:\\Users\\me\\AppData\\Local")
    assert launcher.default_browser_path() == "C:\\Users\\me\\AppData\\Local\\Chromium\\Application\\chrome.exe"

    monkeypatch.delenv("LOCALAPPDATA")
    assert launcher.default_browser_path() is None


def test_run_effect_dispatch(make_app, popen_calls, opened_urls):
    config = ZapConfig(browser_path="Z:\\missing\\chrome.exe")

    run_effect(Quit(), config)
    run_effect(None, config)
    assert popen_calls == [] and opened_urls == []

    run_effect(LaunchApp(make_app("Paint", handle="p!App")), config)
    run_effect(SearchWeb("weather"), config)

    assert popen_calls == [["explorer.exe", "shell:AppsFolder\\p!App"]]
    assert opened_urls == ["https://duckduckgo.com/?q=weather"]
