import logging

import pytest

from fschacha.cli import main


def test_block(capsys):
    main([
        "block",
        "--key", "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
        "--nonce", "000000090000004a00000000",
        "--counter", "1",
    ])
    out = capsys.readouterr().out.strip()
    assert out.startswith("10f1e7e4d13b5915")
    assert len(out) == 128


def test_crypt_full_epoch(capsys):
    main(["crypt", "--key", "00" * 32, "--repeat", "224", "00" * 64])
    lines = capsys.readouterr().out.split()
    assert len(lines) == 224
    assert lines[-1] == (
        "8cc5669354865e402093cc41583618bdbecd24134b5ad59f0cfb00695548ca04"
        "34100c086aa877f4373945e3e0ff31e1126f79712df6e52df9178b5714a001d7"
    )


def test_crypt_multiple_chunks(capsys):
    main(["crypt", "--key", "11" * 32, "--rekey-interval", "2", "00", "0000", "000000"])
    lines = capsys.readouterr().out.split()
    assert [len(x) for x in lines] == [2, 4, 6]


def test_verbose_logs_rekey(capsys, caplog):
    with caplog.at_level(logging.DEBUG, logger="fschacha.fschacha20"):
        main(["-v", "crypt", "--key", "00" * 32, "--rekey-interval", "2", "--repeat", "4", "ab"])
    assert sum("rekey" in r.getMessage() for r in caplog.records) == 2


@pytest.mark.parametrize("argv", [
    ["block", "--key", "00" * 31, "--nonce", "00" * 12],
    ["block", "--key", "00" * 32, "--nonce", "00" * 8],
    ["block", "--key", "zz", "--nonce", "00" * 12],
    ["crypt", "--key", "00" * 32, "--rekey-interval", "0", "00"],
])
def test_errors_exit_2(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
