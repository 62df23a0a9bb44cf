import pytest

from tombeau.errors import ErrorCode, GameError, describe


def test_describe_ok():
    assert describe(ErrorCode.OK) == "Tout c'est bien passé."


def test_describe_argument():
    assert describe(ErrorCode.ARGUMENT) == "Un argument est non-valide : "


def test_describe_file_code_is_unknown():
    assert describe(ErrorCode.FILE) == "Code erreur inconnu, veuillez l'ajouter."


def test_every_known_code_has_distinct_text():
    texts = {describe(code) for code in ErrorCode if code is not ErrorCode.FILE}
    assert len(texts) == len(ErrorCode) - 1


def test_game_error_carries_code_and_message():
    err = GameError(ErrorCode.MEMORY, "plus de place")
    assert err.code is ErrorCode.MEMORY
    assert err.message == "plus de place"
    assert str(err) == describe(ErrorCode.MEMORY) + "plus de place"


def test_game_error_is_raisable():
    err = GameError(ErrorCode.OTHER, "rien")
    with pytest.raises(GameError, match="rien") as info:
        raise err
    assert info.value.code is ErrorCode.OTHER
    assert str(info.value) == describe(ErrorCode.OTHER) + "rien"