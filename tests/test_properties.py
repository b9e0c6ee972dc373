import pytest

from jhome import properties
from jhome.config import JhomeConfig


def test_set_get_and_clear():
    assert properties.get_property("java.home") is None
    properties.set_property("java.home", "/opt/jdk")
    assert properties.get_property("java.home") == "/opt/jdk"
    assert properties.properties() == {"java.home": "/opt/jdk"}
    assert properties.clear_property("java.home") == "/opt/jdk"
    assert properties.get_property("java.home") is None
    assert properties.clear_property("java.home") is None


def test_properties_returns_a_copy():
    properties.set_property("a", "1")
    snapshot = properties.properties()
    snapshot["a"] = "2"
    assert properties.get_property("a") == "1"


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        properties.set_property("", "x")


def test_define_parses_key_value_pairs():
    properties.define(["java.home=/opt/jdk21", " user.name = duke ", "empty="])
    assert properties.get_property("java.home") == "/opt/jdk21"
    assert properties.get_property("user.name") == "duke"
    assert properties.get_property("empty") == ""


def test_define_keeps_equals_in_value():
    properties.define(["opts=-Xmx=1g"])
    assert properties.get_property("opts") == "-Xmx=1g"


def test_define_rejects_bare_names():
    with pytest.raises(ValueError) as exc:
        properties.define(["java.home"])
    assert "key=value" in str(exc.value)


def test_load_defaults_does_not_override():
    properties.set_property("java.home", "/cli")
    properties.load_defaults(JhomeConfig(properties={"java.home": "/cfg", "other": "v"}))
    assert properties.get_property("java.home") == "/cli"
    assert properties.get_property("other") == "v"
