import json
from unittest import TestCase

from parameterized import parameterized

from hellofn.handler import DEFAULT_NAME, hello, resolve_name


class TestHello(TestCase):
    @parameterized.expand(
        [
            ("no_query_string_parameters", {}),
            ("null_query_string_parameters", {"queryStringParameters": None}),
            ("empty_query_string_parameters", {"queryStringParameters": {}}),
            ("no_name_key", {"queryStringParameters": {"other": "value"}}),
            ("empty_name", {"queryStringParameters": {"name": ""}}),
        ]
    )
    def test_falls_back_to_nobody(self, _, event):
        response = hello(event)

        self.assertEqual(response, {"statusCode": 200, "body": '{"message":"Hello Nobody"}'})

    def test_greets_given_name(self):
        response = hello({"queryStringParameters": {"name": "Ada"}})

        self.assertEqual(response, {"statusCode": 200, "body": '{"message":"Hello Ada"}'})

    @parameterized.expand(
        [
            ("whitespace", " "),
            ("quotes", 'Ada "the Countess"'),
            ("backslash", "C:\\Users"),
            ("unicode", "Zoë 李"),
            ("newline", "line\nbreak"),
        ]
    )
    def test_name_is_interpolated_verbatim(self, _, name):
        response = hello({"queryStringParameters": {"name": name}})

        self.assertEqual(response["statusCode"], 200)
        self.assertEqual(json.loads(response["body"]), {"message": "Hello " + name})

    def test_unicode_is_not_escaped(self):
        response = hello({"queryStringParameters": {"name": "Zoë"}})

        self.assertEqual(response["body"], '{"message":"Hello Zoë"}')

    def test_body_has_only_message_key(self):
        body = json.loads(hello({"queryStringParameters": {"name": "Ada", "extra": "ignored"}})["body"])

        self.assertEqual(list(body.keys()), ["message"])
        self.assertIsInstance(body["message"], str)

    def test_context_is_ignored(self):
        event = {"queryStringParameters": {"name": "Ada"}}

        self.assertEqual(hello(event, object()), hello(event))

    def test_none_event_is_treated_as_empty(self):
        self.assertEqual(hello(None)["body"], '{"message":"Hello Nobody"}')

    def test_event_is_not_modified(self):
        event = {"queryStringParameters": {"name": "Ada"}}

        hello(event)

        self.assertEqual(event, {"queryStringParameters": {"name": "Ada"}})


class TestResolveName(TestCase):
    @parameterized.expand(
        [
            (None,),
            ("name=Ada",),
            (["Ada"],),
            ({"name": None},),
            ({"name": 42},),
            ({"Name": "Ada"},),
        ]
    )
    def test_unusable_parameters_give_default(self, query_string_parameters):
        self.assertEqual(resolve_name(query_string_parameters), DEFAULT_NAME)

    def test_returns_name(self):
        self.assertEqual(resolve_name({"name": "Ada"}), "Ada")
