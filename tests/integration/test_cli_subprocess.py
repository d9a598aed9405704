"""
Integration tests running `python -m chksum` as a subprocess.

These exercise the installed entry point end to end, including settings
discovery from the working directory.
"""

from pathlib import Path

HI_BLOB_ID = "45b983be36b73c0788dc9cbcb76cbb80fc7bb057"


class TestCliSubprocess:
    """End-to-end CLI runs."""

    def test_sum_then_verify(self, chksum_cli, tmp_path: Path) -> None:
        """A checksum printed by `sum` verifies the same file."""
        (tmp_path / "data.bin").write_bytes(b"hi\n")

        result = chksum_cli("sum", "-a", "git", "data.bin")
        line = result.stdout.strip()
        assert line.startswith(f"git:{HI_BLOB_ID}")

        checksum = line.split()[0]
        result = chksum_cli("verify", checksum, "data.bin")
        assert result.stdout.strip() == "OK"

    def test_verify_mismatch_exit_code(self, chksum_cli, tmp_path: Path) -> None:
        (tmp_path / "data.bin").write_bytes(b"changed\n")
        result = chksum_cli("verify", f"git:{HI_BLOB_ID}", "data.bin", check=False)
        assert result.returncode == 1
        assert "FAILED" in result.stdout

    def test_config_file_in_cwd(self, chksum_cli, tmp_path: Path) -> None:
        (tmp_path / ".chksum").mkdir()
        (tmp_path / ".chksum" / "config.toml").write_text("[checksum]\ndigest_length = 4\n")
        result = chksum_cli("digest", "hello")
        assert result.stdout.strip() == "2cf2"
