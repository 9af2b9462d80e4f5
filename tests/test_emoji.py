import pytest

from linebot_models.emoji import Emoji


def test_to_dict_omits_zero_length():
    assert Emoji(0, "5ac1bfd5040ab15980c9b435", "001").to_dict() == {
        "index": 0,
        "productId": "5ac1bfd5040ab15980c9b435",
        "emojiId": "001",
    }


def test_index_is_always_present():
    assert Emoji().to_dict() == {"index": 0}


def test_from_dict_reads_length():
    emoji = Emoji.from_dict({"index": 3, "length": 6, "productId": "p", "emojiId": "e"})
    assert emoji == Emoji(index=3, product_id="p", emoji_id="e", length=6)


@pytest.mark.parametrize("emoji", [Emoji(2, "p", "e"), Emoji(7, "prod", "042", 6), Emoji()])
def test_round_trip(emoji):
    assert Emoji.from_dict(emoji.to_dict()) == emoji


def test_rejects_string_index():
    with pytest.raises(TypeError):
        Emoji.from_dict({"index": "3"})


def test_rejects_non_object():
    with pytest.raises(TypeError):
        Emoji.from_dict([1, 2])