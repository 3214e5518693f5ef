import json
import subprocess
from pathlib import Path

from ferrolings.project import Crate, RustAnalyzerProject


def test_sysroot_from_env(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/srv/rust/library")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/srv/rust/library"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"/opt/toolchain\n", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    expected = Path("/opt/toolchain", "lib", "rustlib", "src", "rust", "library")
    assert Path(project.sysroot_src) == expected
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_exercises_to_json_only_rust_files(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "one.rs").write_text("")
    (tmp_path / "two.rs").write_text("")
    (tmp_path / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = {Path(c.root_module) for c in project.crates}
    assert roots == {tmp_path / "a" / "one.rs", tmp_path / "two.rs"}
    assert all(c.edition == "2021" and c.cfg == ["test"] for c in project.crates)


def test_empty_dir_gives_no_crates(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="/sys", crates=[Crate("ex/a.rs")])
    data = json.loads(project.to_json())
    assert data["sysroot_src"] == "/sys"
    assert data["crates"] == [
        {"root_module": "ex/a.rs", "edition": "2021", "deps": [], "cfg": ["test"]}
    ]
    assert " " not in project.to_json()


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sys", crates=[Crate("ex/b.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()