import argparse
from pathlib import Path

import pytest

from fast_seed.cli.make_command import MakeCommand


@pytest.fixture(autouse=True)
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("SEEDER_FILES_PATH", "APP_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_make_seeder_from_pascal_case_name(capsys):
    MakeCommand().execute(argparse.Namespace(name="UserSeeder", path=None))

    generated = Path("app/db/seeders/user_seeder.py")
    assert generated.exists()

    content = generated.read_text(encoding="utf-8")
    assert "from fast_seed import Seeder" in content
    assert "class UserSeeder(Seeder):" in content
    assert "async def run(self) -> None:" in content
    assert "✅ Created seeder" in capsys.readouterr().out


def test_make_seeder_from_snake_case_name():
    MakeCommand().execute(argparse.Namespace(name="country_seeder", path=None))

    content = Path("app/db/seeders/country_seeder.py").read_text(encoding="utf-8")
    assert "class CountrySeeder(Seeder):" in content


def test_make_seeder_with_path_override():
    MakeCommand().execute(argparse.Namespace(name="UserSeeder", path="database/seeders"))

    assert Path("database/seeders/user_seeder.py").exists()


def test_make_seeder_refuses_to_overwrite(capsys):
    target = Path("app/db/seeders/user_seeder.py")
    target.parent.mkdir(parents=True)
    target.write_text("# keep me\n", encoding="utf-8")

    MakeCommand().execute(argparse.Namespace(name="UserSeeder", path=None))

    assert target.read_text(encoding="utf-8") == "# keep me\n"
    assert "❌ File exists" in capsys.readouterr().out


def test_make_seeder_rejects_path_outside_project(tmp_path, capsys):
    MakeCommand().execute(argparse.Namespace(name="UserSeeder", path="../outside"))

    assert "❌ Path must be inside the project root" in capsys.readouterr().out
    assert not (tmp_path.parent / "outside").exists()
