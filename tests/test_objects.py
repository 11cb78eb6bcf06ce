import threading

from pdfink.objects import (
    CatalogObj,
    DeviceRGBObj,
    EncryptionObj,
    ExtGState,
    ExtGStateOptions,
    ExtGStatesMap,
)


def test_catalog_without_outlines():
    assert CatalogObj().write() == "<<\n  /Type /Catalog\n  /Pages 2 0 R\n>>\n"


def test_catalog_with_outlines_points_one_past_index():
    catalog = CatalogObj()
    catalog.set_outlines_index(4)
    text = catalog.write()
    assert "  /PageMode /UseOutlines\n" in text
    assert f"  /Outlines {catalog.outlines_obj_id} 0 R\n" in text
    assert catalog.outlines_obj_id == 5


def test_encryption_escapes_special_bytes():
    obj = EncryptionObj(u_value=b"plain", o_value=b"a(b)\\c\r", p_value=-44)
    out = obj.write()
    assert out.startswith(b"<<\n/Filter /Standard\n/V 1\n/R 2\n")
    assert b"/O (a\\(b\\)\\\\c\\r)\n" in out
    assert b"/U (plain)\n" in out
    assert b"/P -44\n" in out
    assert out.endswith(b">>\n")


def test_device_rgb_plain():
    data = b"\x01\x02\x03"
    out = DeviceRGBObj(data=data).write()
    assert out == b"<<\n/Length 3\n>>\nstream\n" + data + b"endstream\n"


def test_device_rgb_encrypted_uses_encryptor():
    data = b"abc"
    out = DeviceRGBObj(data=data, encryptor=lambda b: b[::-1]).write()
    assert out.endswith(b"stream\ncba\nendstream\n")


def test_ext_g_state_options_key_is_stable():
    a = ExtGStateOptions(stroking_ca=0.5, blend_mode="Multiply")
    b = ExtGStateOptions(stroking_ca=0.5, blend_mode="Multiply")
    assert a.key() == b.key()
    assert a.key() == "CA_0.500;BM_Multiply;"
    assert ExtGStateOptions().key() == ""


def test_ext_g_state_options_key_distinguishes_fields():
    assert ExtGStateOptions(stroking_ca=0.3).key() != ExtGStateOptions(non_stroking_ca=0.3).key()
    assert ExtGStateOptions(smask_index=2).key().startswith("SMask_2_0_R")


def test_ext_g_state_write():
    state = ExtGState.from_options(
        ExtGStateOptions(stroking_ca=0.25, non_stroking_ca=0.75, blend_mode="Normal", smask_index=6)
    )
    text = state.write()
    assert text.startswith("<<\n\t/Type /ExtGState\n")
    assert "\t/ca 0.750\n" in text
    assert "\t/CA 0.250\n" in text
    assert "\t/BM Normal\n" in text
    assert "\t/SMask 7 0 R\n" in text
    assert text.index("/ca ") < text.index("/CA ")


def test_ext_g_state_minimal():
    assert ExtGState().write() == "<<\n\t/Type /ExtGState\n>>\n"


def test_map_find_and_save_round_trip():
    states = ExtGStatesMap()
    options = ExtGStateOptions(non_stroking_ca=0.4)
    assert states.find(options) is None
    saved = states.save(options.key(), ExtGState.from_options(options, index=9))
    assert states.find(options) == saved
    assert states.find(ExtGStateOptions(non_stroking_ca=0.4)).index == 9
    assert len(states) == 1


def test_map_concurrent_saves():
    states = ExtGStatesMap()

    def worker(n):
        opts = ExtGStateOptions(smask_index=n)
        states.save(opts.key(), ExtGState.from_options(opts, index=n))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(states) == 20
    assert states.find(ExtGStateOptions(smask_index=13)).index == 13