from ann_helper.config import AnnConfig
from ann_helper.tools import meta


def test_health_ok():
    h = meta.make_health(AnnConfig())()
    assert isinstance(h, dict)
    assert h.get("schemaVersion") == "1.0.0"
    assert h.get("ok") is True
    assert h.get("sources") == ["ann"]


def test_about_reports_endpoint():
    a = meta.make_about(AnnConfig(base_url="https://ann.test"))()
    assert a["endpoints"]["ann"] == "https://ann.test/api.xml"
    assert a["limits"]["retries"] == 0
