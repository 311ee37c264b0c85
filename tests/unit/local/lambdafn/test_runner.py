import json
from io import StringIO
from unittest import TestCase
from unittest.mock import Mock

from parameterized import parameterized

from hellofn.local.lambdafn.context import LambdaContext
from hellofn.local.lambdafn.exceptions import FunctionNotFound, InvalidEventException
from hellofn.local.lambdafn.provider import FunctionRegistry
from hellofn.local.lambdafn.runner import LocalFunctionRunner


class TestLocalFunctionRunner_invoke(TestCase):
    def setUp(self):
        self.stderr = StringIO()
        self.runner = LocalFunctionRunner(FunctionRegistry())

    def test_must_invoke_greeting_function(self):
        output, is_error = self.runner.invoke("hello", '{"queryStringParameters": {"name": "Ada"}}')

        self.assertFalse(is_error)
        self.assertEqual(json.loads(output), {"statusCode": 200, "body": '{"message":"Hello Ada"}'})

    def test_empty_event_string_is_empty_event(self):
        output, _ = self.runner.invoke("hello", "")

        self.assertEqual(json.loads(output)["body"], '{"message":"Hello Nobody"}')

    def test_must_raise_if_function_not_found(self):
        with self.assertRaises(FunctionNotFound):
            self.runner.invoke("goodbye", "{}")

    def test_must_raise_on_invalid_json_event(self):
        with self.assertRaises(InvalidEventException):
            self.runner.invoke("hello", "{not json")

    def test_handler_receives_event_and_context(self):
        handler = Mock(return_value={"statusCode": 204})
        runner = LocalFunctionRunner(FunctionRegistry({"fn": handler}))

        output, is_error = runner.invoke("fn", '{"key": "value"}')

        event, context = handler.call_args[0]
        self.assertEqual(event, {"key": "value"})
        self.assertIsInstance(context, LambdaContext)
        self.assertEqual(context.function_name, "fn")
        self.assertEqual(json.loads(output), {"statusCode": 204})
        self.assertFalse(is_error)

    def test_handler_exception_becomes_error_document(self):
        def failing(event, context):
            raise ValueError("boom")

        runner = LocalFunctionRunner(FunctionRegistry({"fn": failing}))

        output, is_error = runner.invoke("fn", "{}", stderr=self.stderr)

        document = json.loads(output)
        self.assertTrue(is_error)
        self.assertEqual(document["errorMessage"], "boom")
        self.assertEqual(document["errorType"], "ValueError")
        self.assertIsInstance(document["stackTrace"], list)
        self.assertIn("ValueError: boom", self.stderr.getvalue())

    @parameterized.expand(
        [
            ("object_body", {"statusCode": 200, "body": object()}),
            ("set_result", {1, 2}),
        ]
    )
    def test_unserializable_result_becomes_error_document(self, _, result):
        runner = LocalFunctionRunner(FunctionRegistry({"fn": lambda event, context: result}))

        output, is_error = runner.invoke("fn", "{}", stderr=self.stderr)

        self.assertTrue(is_error)
        self.assertEqual(json.loads(output)["errorType"], "TypeError")
        self.assertIn("TypeError", self.stderr.getvalue())

    def test_stderr_is_optional(self):
        runner = LocalFunctionRunner(FunctionRegistry({"fn": Mock(side_effect=RuntimeError("boom"))}))

        _, is_error = runner.invoke("fn", "{}")

        self.assertTrue(is_error)

    def test_is_debugging(self):
        self.assertFalse(self.runner.is_debugging())
        self.assertTrue(LocalFunctionRunner(FunctionRegistry(), debugging=True).is_debugging())
