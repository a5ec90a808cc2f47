"""
Tests for configuration — default.yaml parsing, the canonical template
and path resolution.
"""

import textwrap
from pathlib import Path

import pytest

from limanet.core.config.loader import ConfigError, MalformedDocument, load_document, parse_document
from limanet.core.config.paths import LimaPaths
from limanet.core.config.template import FINCH_SHARED_NETWORK, NetworkTemplate
from limanet.core.models.network import NetworkEntry


class TestParseDocument:
    """Tests for parse_document()."""

    def test_networks_parsed_in_order(self):
        doc = parse_document(textwrap.dedent("""\
            cpus: 4
            networks:
              - lima: finch-shared
              - socket: /var/run/socket_vmnet
                interface: lima1
        """))
        assert len(doc.networks) == 2
        assert doc.networks[0].lima == "finch-shared"
        assert doc.networks[1].socket == "/var/run/socket_vmnet"
        assert doc.networks[1].interface == "lima1"

    def test_accepts_bytes(self):
        doc = parse_document(b"networks:\n  - lima: finch-shared\n")
        assert doc.networks[0].lima == "finch-shared"

    def test_empty_document(self):
        assert parse_document("").networks == []
        assert parse_document(b"").networks == []

    def test_null_networks_is_empty(self):
        assert parse_document("networks:\n").networks == []

    def test_unrelated_keys_kept(self):
        doc = parse_document("memory: 4GiB\n")
        assert doc.networks == []
        assert doc.model_extra == {"memory": "4GiB"}

    def test_scalar_root_rejected(self):
        with pytest.raises(MalformedDocument, match="Expected a YAML mapping"):
            parse_document("this isn't YAML")

    def test_syntax_error_rejected(self):
        with pytest.raises(MalformedDocument, match="Invalid YAML"):
            parse_document(":: invalid: yaml: [")

    def test_non_mapping_entry_rejected(self):
        with pytest.raises(MalformedDocument):
            parse_document("networks:\n  - finch-shared\n")

    def test_wrong_field_type_rejected(self):
        with pytest.raises(MalformedDocument):
            parse_document("networks:\n  - lima: finch-shared\n    metric: lots\n")

    def test_invalid_utf8_rejected(self):
        with pytest.raises(MalformedDocument, match="UTF-8"):
            parse_document(b"networks: \xff\xfe\n")

    def test_duplicate_top_level_key_rejected(self):
        raw = textwrap.dedent("""\
            networks:
              - socket: /var/run/socket_vmnet
            networks:
              - lima: finch-shared
        """)
        with pytest.raises(MalformedDocument, match="duplicate key 'networks'"):
            parse_document(raw)

    def test_duplicate_nested_key_rejected(self):
        with pytest.raises(MalformedDocument, match="duplicate key 'lima'"):
            parse_document("networks:\n  - lima: finch-shared\n    lima: other\n")

    def test_merge_keys_still_allowed(self):
        doc = parse_document(textwrap.dedent("""\
            base: &base
              lima: finch-shared
            networks:
              - <<: *base
        """))
        assert doc.networks[0].lima == "finch-shared"

    def test_malformed_is_config_error(self):
        assert issubclass(MalformedDocument, ConfigError)


class TestConfigDocument:
    def test_network_count_includes_every_kind(self):
        doc = parse_document(textwrap.dedent("""\
            networks:
              - lima: finch-shared
              - not-lima: not-finch-shared
              - socket: /tmp/vmnet.sock
        """))
        assert doc.network_count() == 3

    def test_network_count_empty(self):
        assert parse_document("cpus: 2\n").network_count() == 0


class TestNetworkEntry:
    def test_alias_round_trips_in_attributes(self):
        entry = NetworkEntry.model_validate({"lima": "shared", "macAddress": "52:55:55:00:00:01"})
        assert entry.mac_address == "52:55:55:00:00:01"
        assert entry.attributes() == {"lima": "shared", "macAddress": "52:55:55:00:00:01"}

    def test_extra_keys_break_equality(self):
        plain = NetworkEntry.model_validate({"lima": "finch-shared"})
        extra = NetworkEntry.model_validate({"lima": "finch-shared", "vnl": "x"})
        assert not plain.structurally_equal(extra)
        assert not extra.structurally_equal(plain)

    def test_equal_entries(self):
        a = NetworkEntry.model_validate({"lima": "finch-shared", "interface": "lima0"})
        b = NetworkEntry.model_validate({"interface": "lima0", "lima": "finch-shared"})
        assert a.structurally_equal(b)


class TestLoadDocument:
    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "nope.yaml")

    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "default.yaml"
        path.write_text("networks:\n  - lima: finch-shared\n")
        assert load_document(path).network_count() == 1


class TestNetworkTemplate:
    def test_default_template_text(self):
        assert FINCH_SHARED_NETWORK.text == "networks:\n  - lima: finch-shared\n"
        assert FINCH_SHARED_NETWORK.entry.lima == "finch-shared"

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            FINCH_SHARED_NETWORK.text = "networks: []\n"  # type: ignore[misc]

    def test_custom_template(self):
        template = NetworkTemplate(text="networks:\n  - lima: user-v2\n    interface: lima1\n")
        assert template.entry.attributes() == {"lima": "user-v2", "interface": "lima1"}

    def test_requires_trailing_newline(self):
        with pytest.raises(ConfigError, match="newline"):
            NetworkTemplate(text="networks:\n  - lima: finch-shared")

    def test_requires_single_network(self):
        with pytest.raises(ConfigError, match="exactly one network, got 2"):
            NetworkTemplate(text="networks:\n  - lima: a\n  - socket: /tmp/s\n")

    def test_socket_only_template_accepted(self):
        template = NetworkTemplate(text="networks:\n  - socket: /var/run/socket_vmnet\n")
        assert template.entry.socket == "/var/run/socket_vmnet"

    def test_requires_some_network(self):
        with pytest.raises(ConfigError, match="exactly one"):
            NetworkTemplate(text="cpus: 2\n")

    def test_unparseable_template(self):
        with pytest.raises(MalformedDocument):
            NetworkTemplate(text="just words\n")


class TestLimaPaths:
    def test_explicit_home_wins(self, tmp_path: Path):
        paths = LimaPaths.from_env(home=tmp_path, environ={"LIMANET_LIMA_HOME": "/elsewhere"})
        assert paths.home == tmp_path
        assert paths.default_config_path() == tmp_path / "_config" / "default.yaml"

    def test_environment_overrides(self):
        paths = LimaPaths.from_env(environ={
            "LIMANET_LIMA_HOME": "/data/lima",
            "LIMANET_DEPENDENCY_DIR": "/deps",
            "LIMANET_VMNET_BIN_DIR": "/usr/local/vmnet",
            "LIMANET_SUDOERS_FILE": "/etc/sudoers.d/test",
        })
        assert paths.home == Path("/data/lima")
        assert paths.dependency_dir == Path("/deps")
        assert paths.vmnet_bin_dir == Path("/usr/local/vmnet")
        assert paths.sudoers_file == Path("/etc/sudoers.d/test")

    def test_defaults(self):
        paths = LimaPaths.from_env(environ={})
        assert paths.home == Path.home() / ".finch" / "lima" / "data"
        assert paths.vmnet_bin_dir == Path("/opt/finch/bin")
        assert paths.sudoers_file == Path("/etc/sudoers.d/finch-lima")
