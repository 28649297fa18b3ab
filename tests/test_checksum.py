from estudos.checksum import EXPECTED_CRC32, crc32_ieee, crc64_ecma, main


def test_crc32_source_value():
    assert crc32_ieee("Isto é um teste".encode("utf-8")) == 0xCF20B55


def test_crc32_check_value():
    assert crc32_ieee(b"123456789") == 0xCBF43926


def test_crc64_check_value():
    assert crc64_ecma(b"123456789") == 0x995DC9BBDF1939FA


def test_crc64_empty_is_zero():
    assert crc64_ecma(b"") == 0


def test_str_and_bytes_agree():
    text = "Isto é um teste"
    assert crc64_ecma(text) == crc64_ecma(text.encode("utf-8"))
    assert crc32_ieee(text) == crc32_ieee(text.encode("utf-8"))


def test_crc64_detects_change():
    assert crc64_ecma(b"abc") != crc64_ecma(b"abd")
    assert 0 <= crc64_ecma(b"abc") < 2**64


def test_main_default_reports_ok(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Checksum 32 bits: 0x{EXPECTED_CRC32:X}" in out
    assert "CRC ok!" in out


def test_main_other_value_fails_check(capsys):
    main(["outro valor"])
    out = capsys.readouterr().out
    assert "CRC Falhou!" in out
    assert f"0x{crc64_ecma('outro valor'):x}" in out