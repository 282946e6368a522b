import io
import os
from unittest.mock import patch

import pytest

from cryptohash.infrastructure.di import AppInjector
from cryptohash.presentation.cli import EXIT_FAILURE, EXIT_OK, build_parser, main

MD5_HASH_H = "ed076287532e86365e841e92bfc50d8c"
MD5_HASH_D = "ed07-6287-532e-8636-5e84-1e92-bfc5-0d8c"
SHA256_HASH_H = "7f83b1657ff1fc53b92dc18148a1d65dfc2d4b1fa3d677284addd200126d9069"

class TestBuildParser:

    def test_hash_defaults(self):
        args = build_parser().parse_args(["hash", "file.txt"])

        assert args.command == "hash"
        assert args.paths == ["file.txt"]
        assert args.algorithm is None
        assert args.format == "H"
        assert args.uppercase is False
        assert args.log_level == "warning"

    def test_verify_arguments(self):
        args = build_parser().parse_args(["verify", "file.txt", MD5_HASH_H, "-a", "md5"])

        assert args.path == "file.txt"
        assert args.expected == MD5_HASH_H
        assert args.algorithm == "md5"

    def test_invalid_format_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["hash", "-f", "X", "file.txt"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

class TestMain:

    def test_hash_default_algorithm(self, hello_world_file, capsys):
        exit_code = main(["hash", hello_world_file])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out == f"{SHA256_HASH_H}  {hello_world_file}\n"

    def test_hash_md5_dashed_uppercase(self, hello_world_file, capsys):
        exit_code = main(["hash", "-a", "md5", "-f", "D", "-u", hello_world_file])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out.startswith(MD5_HASH_D.upper())

    def test_hash_stdin(self, hello_world_bytes, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(hello_world_bytes))
        with patch("sys.stdin", stdin):
            exit_code = main(["hash", "-a", "md5", "-"])

        assert exit_code == EXIT_OK
        assert capsys.readouterr().out == f"{MD5_HASH_H}  -\n"

    def test_hash_missing_file(self, temp_dir, capsys):
        missing = os.path.join(temp_dir, "missing.bin")

        exit_code = main(["hash", missing])

        assert exit_code == EXIT_FAILURE
        assert missing in capsys.readouterr().err

    def test_hash_unknown_algorithm(self, hello_world_file, capsys):
        exit_code = main(["hash", "-a", "whirlpool", hello_world_file])

        assert exit_code == EXIT_FAILURE
        assert "whirlpool" in capsys.readouterr().err

    def test_verify_match(self, hello_world_file, capsys):
        exit_code = main(["verify", hello_world_file, MD5_HASH_D])

        assert exit_code == EXIT_OK
        assert "OK (md5)" in capsys.readouterr().out

    def test_verify_mismatch(self, hello_world_file, capsys):
        exit_code = main(["verify", hello_world_file, "0" * 32])

        assert exit_code == EXIT_FAILURE
        assert "FAILED" in capsys.readouterr().out

    def test_verify_invalid_expected(self, hello_world_file, capsys):
        exit_code = main(["verify", hello_world_file, "INVALID"])

        assert exit_code == EXIT_FAILURE
        assert capsys.readouterr().err

    def test_format_regroups(self, capsys):
        exit_code = main(["format", MD5_HASH_H.upper(), "-f", "D"])

        assert exit_code == EXIT_OK
        assert capsys.readouterr().out == f"{MD5_HASH_D}\n"

    def test_format_strips_groups(self, capsys):
        exit_code = main(["format", MD5_HASH_D, "-a", "md5"])

        assert exit_code == EXIT_OK
        assert capsys.readouterr().out == f"{MD5_HASH_H}\n"

    def test_format_inconsistent_separators(self, capsys):
        exit_code = main(["format", "ed07-62870532e08636-5e8401e920bfc500d8c"])

        assert exit_code == EXIT_FAILURE

    def test_format_wrong_size_for_algorithm(self, capsys):
        exit_code = main(["format", MD5_HASH_H, "-a", "sha1"])

        assert exit_code == EXIT_FAILURE
        assert capsys.readouterr().err

    def test_list(self, capsys):
        exit_code = main(["list"])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "md5" in out
        assert "128 bits" in out
        assert "sha512" in out

    def test_main_closes_injector(self, hello_world_file):
        with patch.object(AppInjector, "close") as mock_close:
            main(["hash", hello_world_file])

        mock_close.assert_called_once()
