import json

import pytest

from twitmin.demo import main
from twitmin.resolution.utils import clear_config_cache, reload_topics


@pytest.fixture(autouse=True)
def _packaged_data(monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("TWITMIN_DATA_DIR", raising=False)
    monkeypatch.delenv("TWITMIN_DICTIONARY", raising=False)
    clear_config_cache()


def test_smoke(capsys):
    main(["By the way, thanks"])
    out = json.loads(capsys.readouterr().out)
    assert out["original"] == "By the way, thanks"
    assert out["normalized_length"] == len("By the way, thanks")
    first, _, last = out["tokens"]
    assert first["options"] == ["Btw", "By the way"]
    assert last["options"] == ["thx", "tnx", "thanks"]


def test_smoke_default_sample(capsys):
    main([])
    out = json.loads(capsys.readouterr().out)
    kinds = {t.get("kind") for t in out["tokens"] if t["type"] == "special"}
    assert kinds == {"handle", "url", "hashtag"}


def test_smoke_debug_traces_to_stderr(capsys, monkeypatch):
    monkeypatch.setenv("TWITMIN_DEBUG_TOPICS", "")
    try:
        main(["--debug", "hi #x"])
    finally:
        monkeypatch.delenv("TWITMIN_DEBUG_TOPICS")
        reload_topics()
    assert "[tokenizer][DEBUG]" in capsys.readouterr().err


def test_smoke_missing_dictionary_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", "does_not_exist", "hi"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err
