import pytest

from dotfiles_installer.errors import ConfigError
from dotfiles_installer.manifests import load_manifest, parse_manifest


def test_bundled_manifest_order():
    m = load_manifest()
    assert [c.name for c in m.by_phase("configure")] == [
        "zsh",
        "starship",
        "helix",
        "neofetch",
        "iterm2",
        "warp",
        "ssh",
        "ansible",
        "goto",
        "yadm",
    ]
    assert [c.name for c in m.by_phase("post")] == ["apple-terminal"]


def test_bundled_manifest_details():
    m = load_manifest()
    comps = {c.name: c for c in m.components}

    ssh = comps["ssh"]
    assert ssh.requires == ".ssh"
    assert ssh.links[0].mode == 0o600
    assert ssh.backup_copies[0].name == "ssh_config"

    assert comps["helix"].command == "hx"
    assert comps["helix"].formula == "helix"
    assert comps["iterm2"].ensure_dirs == [".config/iterm2"]
    assert comps["zsh"].formula is None

    assert m.config_dirs.source == ".config"
    assert set(m.config_dirs.exclude) == {"helix", "neofetch", "starship", "iterm2", "yadm"}


def test_yaml_octal_mode_is_accepted():
    m = parse_manifest({"components": [{"name": "x", "links": [{"source": "a", "target": "b", "mode": 0o644}]}]})
    assert m.components[0].links[0].mode == 0o644


def test_bad_mode_raises():
    with pytest.raises(ConfigError):
        parse_manifest({"components": [{"name": "x", "links": [{"source": "a", "target": "b", "mode": "rw"}]}]})


def test_duplicate_names_raise():
    with pytest.raises(ConfigError, match="Duplicate"):
        parse_manifest({"components": [{"name": "zsh"}, {"name": "zsh"}]})


def test_formula_requires_command():
    with pytest.raises(ConfigError):
        parse_manifest({"components": [{"name": "helix", "formula": "helix"}]})


def test_unknown_phase_raises():
    with pytest.raises(ConfigError):
        parse_manifest({"components": [{"name": "x", "phase": "later"}]})


def test_link_needs_source_and_target():
    with pytest.raises(ConfigError):
        parse_manifest({"components": [{"name": "x", "links": [{"source": "a"}]}]})


def test_invalid_manifest_file(tmp_path):
    p = tmp_path / "m.yaml"
    p.write_text("components: [\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_manifest(p)
