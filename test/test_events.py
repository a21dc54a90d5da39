#!/usr/bin/env python3
import json
import unittest

from event_samples import sample_event_data

from teams_handler.errors import InputError
from teams_handler.events import load_event, parse_event


class TestParseEvent(unittest.TestCase):
    def test_fields_extracted(self):
        event = parse_event(sample_event_data())
        self.assertEqual(event.entity_name, "web1")
        self.assertEqual(event.namespace, "default")
        self.assertEqual(event.check_name, "http-check")
        self.assertEqual(event.status, 1)
        self.assertEqual(event.last_ok, 1700000000)
        self.assertEqual(event.issued, 1700000600)
        self.assertEqual(event.history, (0, 1))
        self.assertEqual(dict(event.annotations), {"runbook": "https://wiki/runbooks/http"})

    def test_event_is_immutable(self):
        event = parse_event(sample_event_data())
        with self.assertRaises(Exception):
            event.status = 2
        with self.assertRaises(TypeError):
            event.annotations["new"] = "value"

    def test_missing_optional_fields_default(self):
        data = {
            "entity": {"metadata": {"name": "db1"}},
            "check": {"metadata": {"name": "disk"}},
        }
        event = parse_event(data)
        self.assertEqual(event.namespace, "default")
        self.assertEqual(event.status, 0)
        self.assertEqual(event.output, "")
        self.assertEqual(event.history, ())
        self.assertEqual(dict(event.annotations), {})

    def test_namespace_falls_back_to_event_metadata(self):
        data = sample_event_data()
        del data["entity"]["metadata"]["namespace"]
        data["metadata"]["namespace"] = "prod"
        self.assertEqual(parse_event(data).namespace, "prod")

    def test_missing_entity_or_check(self):
        data = sample_event_data()
        del data["entity"]
        with self.assertRaises(InputError):
            parse_event(data)

        data = sample_event_data()
        del data["check"]
        with self.assertRaises(InputError):
            parse_event(data)

        with self.assertRaises(InputError):
            parse_event(sample_event_data(check=""))

    def test_history_must_be_a_list(self):
        data = sample_event_data()
        data["check"]["history"] = "0120"
        with self.assertRaises(InputError) as ctx:
            parse_event(data)
        self.assertIn("check.history", str(ctx.exception))

    def test_history_entries_must_be_objects(self):
        data = sample_event_data()
        data["check"]["history"] = [{"status": 1}, 2]
        with self.assertRaises(InputError) as ctx:
            parse_event(data)
        self.assertIn("check.history[1]", str(ctx.exception))

    def test_null_history_is_empty(self):
        data = sample_event_data()
        data["check"]["history"] = None
        self.assertEqual(parse_event(data).history, ())

    def test_invalid_status(self):
        data = sample_event_data()
        data["check"]["status"] = "bad"
        with self.assertRaises(InputError):
            parse_event(data)

    def test_override_annotations_kept_apart(self):
        data = sample_event_data()
        data["check"]["metadata"]["annotations"] = {"k": "check"}
        data["entity"]["metadata"]["annotations"] = {"k": "entity"}
        event = parse_event(data)
        self.assertEqual(event.check_annotations["k"], "check")
        self.assertEqual(event.entity_annotations["k"], "entity")
        self.assertNotIn("k", event.annotations)


class TestLoadEvent(unittest.TestCase):
    def test_from_json_text_and_bytes(self):
        raw = json.dumps(sample_event_data())
        self.assertEqual(load_event(raw).entity_name, "web1")
        self.assertEqual(load_event(raw.encode("utf-8")).entity_name, "web1")

    def test_empty_input(self):
        with self.assertRaises(InputError):
            load_event("   ")

    def test_invalid_json(self):
        with self.assertRaises(InputError) as ctx:
            load_event("{not json")
        self.assertIn("failed to unmarshal", str(ctx.exception))

    def test_non_object_json(self):
        with self.assertRaises(InputError):
            load_event("[1, 2]")


if __name__ == '__main__':
    unittest.main()
