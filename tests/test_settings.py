import argparse
import copy
import json
import pathlib

import pytest

import minikube_utils.base.settings as bs
import minikube_utils.settings as s


@pytest.fixture()
def base_config() -> dict:
    return {
        "minikube_utils": {
            "minikube_path": "/opt/minikube/bin/minikube",
            "vm_driver": "kvm2",
            "additional_flags": "--cpus=4 --memory=8g",
        },
    }


def test_add_cmd_line_params():
    base = {"lvl1": {"lvl2": {"lvl3": 42}}, "foo": "bar"}

    test = copy.deepcopy(base)
    bs.add_cmd_line_params(test, ["lvl1.lvl2.lvl3=43", "foo='baz'"])
    assert test == {"lvl1": {"lvl2": {"lvl3": 43}}, "foo": "baz"}

    test = copy.deepcopy(base)
    bs.add_cmd_line_params(test, [])
    assert test == base

    test = copy.deepcopy(base)
    bs.add_cmd_line_params(test, ["bla=13", "lvl1.foo=42"])
    assert test == {"lvl1": {"lvl2": {"lvl3": 42}, "foo": 42}, "foo": "bar", "bla": 13}

    test = copy.deepcopy(base)
    bs.add_cmd_line_params(test, ["foo='string with = sign'"])
    assert test == {"lvl1": {"lvl2": {"lvl3": 42}}, "foo": "string with = sign"}

    test = copy.deepcopy(base)
    bs.add_cmd_line_params(test, ["foo = 'with spaces'"])
    assert test == {"lvl1": {"lvl2": {"lvl3": 42}}, "foo": "with spaces"}

    # bad input
    test = copy.deepcopy(base)
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, [""])
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, ["foo="])
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, ["=42"])
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, ["foo: 42"])
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, ["foo=bad_string"])
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, ["lvl1.doesnt_exit.foo=42"])
    with pytest.raises(bs.SettingsError):
        bs.add_cmd_line_params(test, ["foo.bar=42"])


def test_check_settings_section(base_config, caplog):
    bs.check_settings_section(base_config)
    bs.check_settings_section({})
    bs.check_settings_section({"minikube_utils": {"vm_driver": None}})

    with pytest.raises(bs.SettingsError):
        bs.check_settings_section({"minikube_utils": "kvm2"})
    with pytest.raises(bs.SettingsError):
        bs.check_settings_section({"minikube_utils": {"minikube_path": 42}})

    # unknown keys are only reported
    bs.check_settings_section({"minikube_utils": {"vm_drivre": "kvm2"}})
    assert "vm_drivre" in caplog.text


def test_add_settings_arguments():
    parser = argparse.ArgumentParser()
    s.add_settings_arguments(parser)

    args = parser.parse_args([])
    assert args.settings_file is None
    assert args.settings == []

    args = parser.parse_args(
        ["--settings", "file.toml", "minikube_utils.vm_driver='docker'"]
    )
    assert args.settings_file == pathlib.Path("file.toml")
    assert args.settings == ["minikube_utils.vm_driver='docker'"]


def test_read_settings_from_args__without_file():
    args = argparse.Namespace(settings_file=None, settings=[])
    assert s.read_settings_from_args(args) == {"minikube_utils": {}}

    args = argparse.Namespace(
        settings_file=None, settings=["minikube_utils.vm_driver='docker'"]
    )
    assert s.read_settings_from_args(args) == {
        "minikube_utils": {"vm_driver": "docker"}
    }

    args = argparse.Namespace(
        settings_file=None, settings=["minikube_utils.vm_driver=13"]
    )
    with pytest.raises(bs.SettingsError):
        s.read_settings_from_args(args)


def test_read_settings_from_args__with_file(tmp_path, base_config):
    config_file = tmp_path / "config.json"
    with open(config_file, "w") as f:
        json.dump(base_config, f)

    args = argparse.Namespace(
        settings_file=config_file,
        settings=["minikube_utils.vm_driver='docker'"],
    )
    settings = s.read_settings_from_args(args)

    assert settings["minikube_utils"]["minikube_path"] == "/opt/minikube/bin/minikube"
    assert settings["minikube_utils"]["additional_flags"] == "--cpus=4 --memory=8g"
    assert settings["minikube_utils"]["vm_driver"] == "docker"


def test_read_settings_from_args__file_without_section(tmp_path):
    config_file = tmp_path / "config.json"
    with open(config_file, "w") as f:
        json.dump({"something_else": 1}, f)

    args = argparse.Namespace(
        settings_file=config_file,
        settings=["minikube_utils.minikube_path='/bin/minikube'"],
    )
    settings = s.read_settings_from_args(args)

    assert settings["minikube_utils"]["minikube_path"] == "/bin/minikube"


def test_read_settings_from_args__bad_file(tmp_path):
    args = argparse.Namespace(settings_file=tmp_path / "config.txt", settings=[])
    with pytest.raises(bs.SettingsError):
        s.read_settings_from_args(args)

    args = argparse.Namespace(settings_file=tmp_path / "missing.json", settings=[])
    with pytest.raises(FileNotFoundError):
        s.read_settings_from_args(args)
