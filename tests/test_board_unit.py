import unittest
from game import (
    Board,
    Move,
    NINE_HOLES,
    THREE_MENS,
    Position,
    get_variant,
    play_moves,
)


class TestBoardUnit(unittest.TestCase):
    def test_given_nine_holes_geometry_when_listing_spaces_then_starting_rows_wrap_interior(self):
        geo = NINE_HOLES.geometry
        self.assertEqual(geo.interior(), ('a2', 'b2', 'c2', 'a3', 'b3', 'c3', 'a4', 'b4', 'c4'))
        self.assertEqual(len(geo.spaces()), 15)
        self.assertEqual(geo.spaces()[:3], ('a1', 'b1', 'c1'))
        self.assertEqual(geo.spaces()[-3:], ('a5', 'b5', 'c5'))
        self.assertTrue(geo.is_holding('b5'))
        self.assertFalse(geo.is_holding('b3'))
        self.assertEqual(geo.rows()[0], ('a2', 'b2', 'c2'))
        self.assertEqual(geo.columns()[0], ('a2', 'a3', 'a4'))
        self.assertEqual(len(geo.lines()), 6)
        for line in geo.lines():
            for s in line:
                self.assertFalse(geo.is_holding(s))

    def test_given_three_mens_geometry_when_listing_spaces_then_holding_slots_are_off_board(self):
        geo = THREE_MENS.geometry
        self.assertEqual(geo.interior()[0], 'a1')
        self.assertEqual(geo.interior()[-1], 'c3')
        self.assertEqual(geo.holding[1], ('p21', 'p22', 'p23'))
        self.assertFalse(geo.contains('a4'))
        self.assertTrue(geo.contains('p13'))

    def test_given_variants_when_asking_for_opponent_then_players_are_fixed(self):
        self.assertEqual(NINE_HOLES.opponent('x'), 'y')
        self.assertEqual(NINE_HOLES.opponent('y'), 'x')
        self.assertEqual(THREE_MENS.opponent('black'), 'white')
        with self.assertRaises(ValueError):
            NINE_HOLES.opponent('white')
        self.assertIs(get_variant('three-mens'), THREE_MENS)
        with self.assertRaises(ValueError):
            get_variant('chess')

    def test_given_fresh_board_when_reset_then_three_pieces_each_on_holding_spaces(self):
        for variant in (NINE_HOLES, THREE_MENS):
            board = Board(variant)
            pos = board.get()
            self.assertEqual(pos.piece_counts(), {variant.players[0]: 3, variant.players[1]: 3})
            for s in variant.geometry.interior():
                self.assertIsNone(pos.at(s))
            for player in variant.players:
                self.assertEqual(pos.spaces_of(player), list(variant.holding_of(player)))

    def test_given_snapshot_when_board_moves_then_snapshot_unchanged_and_only_two_spaces_differ(self):
        board = Board(NINE_HOLES)
        before = board.get()
        self.assertTrue(board.move('a1', 'a2'))
        after = board.get()
        self.assertEqual(before.at('a1'), 'x')
        self.assertIsNone(before.at('a2'))
        self.assertIsNone(after.at('a1'))
        self.assertEqual(after.at('a2'), 'x')
        b, a = before.occupants(), after.occupants()
        self.assertEqual({s for s in b if b[s] != a[s]}, {'a1', 'a2'})

    def test_given_occupants_dict_when_edited_then_board_unaffected(self):
        board = Board(NINE_HOLES)
        occ = board.get().occupants()
        occ['a1'] = None
        occ['b3'] = 'y'
        self.assertEqual(board.get().at('a1'), 'x')
        self.assertIsNone(board.get().at('b3'))

    def test_given_invalid_coordinates_when_moving_then_no_op(self):
        board = Board(NINE_HOLES)
        start = board.get()
        self.assertFalse(board.move('a2', 'a3'))  # empty start
        self.assertFalse(board.move('a1', 'b1'))  # occupied end
        self.assertFalse(board.move('z9', 'a2'))  # unknown space
        self.assertFalse(board.move('a1', 'a1'))
        self.assertEqual(board.get(), start)

    def test_given_moves_when_reset_then_starting_layout_restored(self):
        board = Board(NINE_HOLES)
        self.assertTrue(play_moves(board, ['a1-a2', 'b5-b3']))
        board.reset()
        self.assertEqual(board.get(), Position.initial(NINE_HOLES))

    def test_given_position_of_other_variant_when_building_board_then_error(self):
        with self.assertRaises(ValueError):
            Board(NINE_HOLES, Position.initial(THREE_MENS))

    def test_given_bad_mapping_when_building_position_then_error(self):
        with self.assertRaises(ValueError):
            Position.from_mapping(NINE_HOLES, {'d9': 'x'})
        with self.assertRaises(ValueError):
            Position.from_mapping(NINE_HOLES, {'a2': 'black'})

    def test_given_position_when_pretty_then_symbols_and_pick_rendered(self):
        pos = Position.initial(NINE_HOLES)
        txt = pos.pretty()
        self.assertIn('X', txt)
        self.assertIn('O', txt)
        self.assertNotIn('[', txt)
        self.assertIn('[X]', pos.pretty('a1'))
        self.assertEqual(len(txt.splitlines()), 6)
        txt3 = Position.initial(THREE_MENS).pretty()
        self.assertIn('p2', txt3)
        self.assertIn('B', txt3)

    def test_given_move_text_when_parsing_then_value_object_or_error(self):
        self.assertEqual(Move.parse('a1-a2'), Move('a1', 'a2'))
        self.assertEqual(Move.parse(['p21', 'a3']), Move('p21', 'a3'))
        self.assertEqual(str(Move('b5', 'a3')), 'b5-a3')
        for bad in ('a1', 'a1-a1', '-a2', 'a1-a2-a3', 12, ['a1'], [1, 2]):
            with self.assertRaises(ValueError):
                Move.parse(bad)


if __name__ == '__main__':
    unittest.main(verbosity=2)
