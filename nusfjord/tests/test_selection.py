import unittest

from nusfjord.cli import build_parser, parse_args
from nusfjord.core.building import ALL_DECKS, Deck
from nusfjord.core.selection import Selection, decks_to_use


class TestDecksToUse(unittest.TestCase):
    def test_main_deck_only(self):
        self.assertEqual(decks_to_use(Deck.CODFISH), {Deck.CODFISH})

    def test_add_in_decks(self):
        decks = decks_to_use(Deck.PLAICE, add=[Deck.SALMON, Deck.HERRING])
        self.assertEqual(decks, {Deck.PLAICE, Deck.SALMON, Deck.HERRING})

    def test_all_base_keeps_expansion_main_deck(self):
        decks = decks_to_use(Deck.SALMON, all_base=True)
        self.assertEqual(decks, {Deck.SALMON, Deck.CODFISH, Deck.HERRING, Deck.MACKEREL})

    def test_all_decks(self):
        self.assertEqual(decks_to_use(Deck.HERRING, all_decks=True), ALL_DECKS)


class TestSelection(unittest.TestCase):
    def test_player_range(self):
        for bad in (0, 6):
            with self.assertRaises(ValueError):
                Selection.build(Deck.CODFISH, players=bad)

    def test_main_deck_must_be_selected(self):
        with self.assertRaises(ValueError):
            Selection(players=2, main_deck=Deck.CODFISH, decks=frozenset({Deck.SALMON}))

    def test_from_args_defaults(self):
        sel = Selection.from_args(parse_args(["Codfish"]))
        self.assertEqual(sel.players, 2)
        self.assertIs(sel.main_deck, Deck.CODFISH)
        self.assertEqual(sel.decks, {Deck.CODFISH})

    def test_from_args_add(self):
        sel = Selection.from_args(parse_args(["Herring", "-p", "4", "-a", "Plaice", "Salmon"]))
        self.assertEqual(sel.players, 4)
        self.assertEqual(sel.decks, {Deck.HERRING, Deck.PLAICE, Deck.SALMON})

    def test_no_color_help_warns_about_round_cards(self):
        help_text = " ".join(build_parser().format_help().split())
        self.assertIn("round cards are no longer hidden", help_text)

    def test_from_args_all_decks(self):
        sel = Selection.from_args(parse_args(["Herring", "-p", "5", "--all-decks"]))
        self.assertIs(sel.main_deck, Deck.HERRING)
        self.assertEqual(sel.decks, ALL_DECKS)


if __name__ == "__main__":
    unittest.main()
