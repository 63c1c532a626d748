"""
Tests for domain models — listen records, settings, generated files.
"""

from sslhgen.core.models import (
    DEFAULT_CONFIG_CANDIDATES,
    GeneratedFile,
    GeneratorSettings,
    ListenSpec,
    format_address,
)


class TestFormatAddress:
    def test_host_and_port(self):
        assert format_address("example.com", "443") == "example.com:443"

    def test_ipv6_is_not_bracketed(self):
        assert format_address("::", "443") == ":::443"

    def test_service_name_port(self):
        assert format_address("localhost", "https") == "localhost:https"

    def test_no_trimming(self):
        assert format_address(" a ", " 1 ") == " a : 1 "


class TestListenSpec:
    def test_address(self):
        spec = ListenSpec(host="0.0.0.0", port="443")
        assert spec.address == "0.0.0.0:443"

    def test_equality(self):
        assert ListenSpec(host="a", port="1") == ListenSpec(host="a", port="1")


class TestGeneratorSettings:
    def test_sslh_defaults(self):
        s = GeneratorSettings()
        assert s.generator_name == "systemd-sslh-generator"
        assert s.service == "sslh.service"
        assert s.unit_name == "sslh.socket"
        assert s.documentation == ["man:sslh(8)", "man:systemd-sslh-generator(8)"]
        assert s.config_candidates == ["/etc/sslh.cfg", "/etc/sslh/sslh.cfg"]
        assert s.free_bind is True

    def test_candidates_not_shared(self):
        s = GeneratorSettings()
        s.config_candidates.append("/tmp/x.cfg")
        assert GeneratorSettings().config_candidates == DEFAULT_CONFIG_CANDIDATES

    def test_override_candidates(self):
        s = GeneratorSettings().model_copy(update={"config_candidates": ["/srv/sslh.cfg"]})
        assert s.config_candidates == ["/srv/sslh.cfg"]
        assert s.unit_name == "sslh.socket"


class TestGeneratedFile:
    def test_defaults(self):
        f = GeneratedFile(path="sslh.socket", content="x\n")
        assert set(GeneratedFile.model_fields) == {"path", "content", "reason"}
        assert f.reason == ""
