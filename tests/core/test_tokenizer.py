# tests/core/test_tokenizer.py
from vocab_http_api.services.tokenizer import tokenize, unique_tokens


class TestTokenize:

    def test_empty_input_yields_empty_set(self):
        assert tokenize("") == set()
        assert tokenize("   \t\n ") == set()

    def test_duplicates_collapse(self):
        assert tokenize("hola mundo hola") == {"hola", "mundo"}

    def test_splits_on_any_whitespace_run(self):
        text = "uno\tdos\n\ntres   cuatro\r\ncinco"
        assert tokenize(text) == {"uno", "dos", "tres", "cuatro", "cinco"}

    def test_no_case_folding_or_punctuation_stripping(self):
        tokens = tokenize("Casa casa casa, ¿casa?")
        assert tokens == {"Casa", "casa", "casa,", "¿casa?"}

    def test_whitespace_variants_do_not_create_distinct_tokens(self):
        assert tokenize(" gato\tgato\ngato ") == {"gato"}


class TestUniqueTokens:

    def test_keeps_first_appearance_order(self):
        assert unique_tokens("b a b c a") == ["b", "a", "c"]

    def test_matches_tokenize_as_a_set(self):
        text = "el perro y el gato y el ratón"
        assert set(unique_tokens(text)) == tokenize(text)
        assert len(unique_tokens(text)) == len(tokenize(text))
