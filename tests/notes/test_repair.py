import json
import unittest

from insight_notes.errors import InvalidJsonFormatError
from insight_notes.notes.repair import parse_note_response, split_concatenated_objects, strip_code_fences


class StripCodeFencesTests(unittest.TestCase):
    def test_strips_language_tagged_fence(self):
        self.assertEqual(strip_code_fences('```json\n[1, 2]\n```'), "[1, 2]")

    def test_strips_bare_fence(self):
        self.assertEqual(strip_code_fences('```\n{"a": 1}\n```\n'), '{"a": 1}')

    def test_leaves_unfenced_text_alone(self):
        self.assertEqual(strip_code_fences('  {"a": 1}  '), '{"a": 1}')


class ParseNoteResponseTests(unittest.TestCase):
    def test_fenced_array_round_trips(self):
        notes = [
            {"title": "One", "body": "First body", "tags": ["a", "b c"]},
            {"title": "Two", "body": "Second body", "tags": [], "properties": {"aliases": ["2"]}},
        ]
        raw = f"```json\n{json.dumps(notes, indent=2)}\n```"

        self.assertEqual(parse_note_response(raw), notes)

    def test_single_object_is_wrapped(self):
        raw = '```json\n{"title":"T","body":"B","tags":["x y","#z"]}\n```'

        self.assertEqual(parse_note_response(raw), [{"title": "T", "body": "B", "tags": ["x y", "#z"]}])

    def test_concatenated_objects_are_recovered_in_order(self):
        fragments = ['{"title": "A", "n": 1}', '{"title": "B", "n": 2}', '{"title": "C", "n": 3}']
        raw = "".join(fragments)

        self.assertEqual(parse_note_response(raw), [json.loads(f) for f in fragments])

    def test_concatenated_objects_with_whitespace_between(self):
        raw = '```\n{"title": "A"}\n\n{"title": "B"}\n```'

        self.assertEqual(parse_note_response(raw), [{"title": "A"}, {"title": "B"}])

    def test_one_malformed_fragment_fails_whole_payload(self):
        raw = '{"title": "A"}{"title": B}{"title": "C"}'

        with self.assertRaises(InvalidJsonFormatError):
            parse_note_response(raw)

    def test_invalid_json_format_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            parse_note_response("not json at all")

    def test_empty_response_is_rejected(self):
        with self.assertRaises(InvalidJsonFormatError):
            parse_note_response("```json\n```")

    def test_scalar_json_is_wrapped(self):
        self.assertEqual(parse_note_response('"just text"'), ["just text"])

    def test_brace_inside_string_is_not_repaired(self):
        raw = '{"title": "A", "body": "uses } here"}{"title": "B"}'

        with self.assertRaises(InvalidJsonFormatError):
            parse_note_response(raw)


class SplitConcatenatedObjectsTests(unittest.TestCase):
    def test_matches_parsing_each_fragment_individually(self):
        fragments = ['{"x": 1}', '{"y": [1, 2]}', '{"z": "w"}']

        self.assertEqual(
            split_concatenated_objects("".join(fragments)),
            [json.loads(f) for f in fragments],
        )

    def test_no_fragments_returns_empty_list(self):
        self.assertEqual(split_concatenated_objects("   \n"), [])


if __name__ == "__main__":
    unittest.main()
