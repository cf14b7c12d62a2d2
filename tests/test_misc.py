"""
test_misc.py ~ Testing of Misc. Functions

Designed for those simple functions that don't need their own dedicated test files
But we want to hit them anyways
"""
import pytest

import nickserv
from nickserv.protocol import identifierify, normalize_mode


def test_identifierify():
    good_name = identifierify("MyVerySimpleName")
    bad_name = identifierify("I'mASpec!äl/Name!_")
    assert good_name == "myverysimplename"
    assert bad_name == "i_maspec__l_name__"


@pytest.mark.parametrize("mode, expected", [
    ("autodetect", nickserv.AUTODETECT),
    ("AUTODETECT", nickserv.AUTODETECT),
    (" both ", nickserv.BOTH),
    ("nick-change", nickserv.NICK_CHANGE),
    ("nick_change", nickserv.NICK_CHANGE),
    ("disabled", nickserv.DISABLED),
    (None, nickserv.DISABLED),
    (False, nickserv.DISABLED),
])
def test_normalize_mode(mode, expected):
    assert normalize_mode(mode) == expected


def test_normalize_mode_unknown():
    with pytest.raises(ValueError):
        normalize_mode("sometimes")


def test_message_target():
    message = nickserv.Message("NickServ!n@h", "NOTICE", ["WiZ"], "please identify")
    assert message.target == "WiZ"
    assert nickserv.Message("NickServ!n@h", "NOTICE").target is None
    assert "please identify" in repr(message)


def test_errors():
    assert issubclass(nickserv.NoMatchingProfile, nickserv.Error)
    assert issubclass(nickserv.CredentialNotFound, nickserv.Error)
    assert issubclass(nickserv.SendFailed, nickserv.Error)
    assert issubclass(nickserv.ConfigError, nickserv.Error)
