import pytest

from paraaudit import search
from paraaudit.core import ParaError


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def home(tmp_path, monkeypatch):
    for name in ("projects", "areas", "resources", "archive"):
        (tmp_path / name).mkdir()
    monkeypatch.setenv("PARA_HOME", str(tmp_path))

    def make(root, name, yaml_text=None):
        module = tmp_path / root / name
        module.mkdir()
        if yaml_text is not None:
            (module / "para.yaml").write_text(yaml_text)
        return module

    make("projects", "website", "tags: [web, ml]\n")
    make("projects", "classifier", "tags: [ml, 3]\n")
    make("areas", "health", "open: [code, .]\n")
    make("archive", "old_site")
    return tmp_path


def test_jaro_edge_cases():
    assert search.jaro("", "") == 1.0
    assert search.jaro("abc", "") == 0.0
    assert search.jaro("", "abc") == 0.0
    assert search.jaro("same", "same") == 1.0
    assert search.jaro("abc", "xyz") == 0.0


def test_jaro_known_values():
    assert search.jaro("martha", "marhta") == pytest.approx(0.944, abs=0.001)
    assert search.jaro("dixon", "dicksonx") == pytest.approx(0.767, abs=0.001)
    assert search.jaro("jellyfish", "smellyfish") == pytest.approx(0.896, abs=0.001)


def test_jaro_symmetric_and_bounded():
    pairs = [("website", "websites"), ("a", "ab"), ("old_site", "website")]
    for a, b in pairs:
        assert search.jaro(a, b) == pytest.approx(search.jaro(b, a))
        assert 0.0 <= search.jaro(a, b) <= 1.0


def test_find_module(home):
    assert search.find_module("health") == home / "areas" / "health"
    assert search.find_module("heal") is None


def test_find_root(home):
    assert search.find_root("areas") == home / "areas"
    assert search.find_root("nowhere") is None


def test_list_rooted_modules(home):
    assert search.list_rooted_modules("projects") == [
        home / "projects" / "classifier",
        home / "projects" / "website",
    ]
    assert search.list_rooted_modules("resources") == []


def test_list_rooted_modules_invalid(home):
    with pytest.raises(ParaError, match="invalid root: bogus"):
        search.list_rooted_modules("bogus")


def test_get_module_tags_only_strings(home):
    assert search.get_module_tags(home / "projects" / "classifier") == ["ml"]
    assert search.get_module_tags(home / "areas" / "health") == []
    assert search.get_module_tags(home / "archive" / "old_site") == []


def test_search_by_tag(home):
    assert search.search_by_tag("ml") == [
        home / "projects" / "classifier",
        home / "projects" / "website",
    ]
    assert search.search_by_tag("none") == []


def test_search_modules_tags_first_without_duplicates(home):
    result = search.search_modules("web", 0.8)
    assert result[0] == home / "projects" / "website"
    assert len(result) == len(set(result))


def test_search_modules_by_substring(home):
    assert search.search_modules("site", 1.0) == [
        home / "projects" / "website",
        home / "archive" / "old_site",
    ]


def test_search_modules_by_similarity(home):
    assert search.search_modules("healht", 0.8) == [home / "areas" / "health"]


def test_get_all_tags(home):
    assert sorted(search.get_all_tags()) == [("ml", 2), ("web", 1)]