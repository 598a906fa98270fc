from identicon.kernel.fingerprint import derive_code

def test_golden_codes():
    assert derive_code("") == 0xA538327AF927DA3E
    assert derive_code("abc") == 0x2A9AC94FA54CA49F
    assert derive_code("hello") == 0xDEF46F73BCDEC043

def test_bytes_and_str_agree():
    assert derive_code(b"abc") == derive_code("abc")
    assert derive_code("żółw") == derive_code("żółw".encode("utf-8"))

def test_code_is_unsigned_64bit():
    for s in ["", "a", "hello", "x" * 1000]:
        c = derive_code(s)
        assert 0 <= c < 2 ** 64
