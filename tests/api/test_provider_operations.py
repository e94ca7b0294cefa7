#!/usr/bin/env python3
"""
Tests for the provider API operations.

HTTP traffic is served by httpx.MockTransport; no network access is needed.
"""

import json
import unittest

import httpx

from db_provisioner.api import (
    create_connection_string,
    create_database,
    list_databases,
)
from db_provisioner.errors import ApiError, ErrorKind, NetworkError
from db_provisioner.models import DatabaseRecord


def _client(handler) -> httpx.Client:
    return httpx.Client(base_url="https://api.test", transport=httpx.MockTransport(handler))


class TestListDatabases(unittest.TestCase):
    def test_returns_records(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": [
                {"id": "db_1", "name": "pr_1_main", "region": "us-east-1"},
                {"id": "db_2", "name": "test_5"},
            ]})

        with _client(handler) as client:
            records = list_databases(client, "tok", "proj_1")

        self.assertEqual(records, [
            DatabaseRecord(id="db_1", name="pr_1_main"),
            DatabaseRecord(id="db_2", name="test_5"),
        ])
        request = seen[0]
        self.assertEqual(request.method, "GET")
        self.assertEqual(request.url.path, "/v1/projects/proj_1/databases")
        self.assertEqual(request.headers["Authorization"], "Bearer tok")
        self.assertEqual(request.headers["Content-Type"], "application/json")

    def test_missing_data_means_no_databases(self):
        with _client(lambda request: httpx.Response(200, json={})) as client:
            self.assertEqual(list_databases(client, "tok", "proj_1"), [])

    def test_null_data_means_no_databases(self):
        with _client(lambda request: httpx.Response(200, json={"data": None})) as client:
            self.assertEqual(list_databases(client, "tok", "proj_1"), [])

    def test_error_status_raises_api_error(self):
        def handler(request):
            return httpx.Response(401, text="invalid token")

        with _client(handler) as client:
            with self.assertRaises(ApiError) as cm:
                list_databases(client, "bad", "proj_1")

        error = cm.exception
        self.assertEqual(error.status_code, 401)
        self.assertEqual(error.body, "invalid token")
        self.assertEqual(error.kind, ErrorKind.API)
        self.assertIn("401", str(error))
        self.assertIn("Unauthorized", str(error))
        self.assertIn("invalid token", str(error))

    def test_transport_error_raises_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with self.assertRaises(NetworkError) as cm:
                list_databases(client, "tok", "proj_1")

        self.assertEqual(cm.exception.kind, ErrorKind.NETWORK)
        self.assertIn("connection refused", str(cm.exception))

    def test_invalid_json_raises_api_error(self):
        with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            with self.assertRaises(ApiError):
                list_databases(client, "tok", "proj_1")

    def test_object_data_raises_api_error(self):
        def handler(request):
            return httpx.Response(200, json={"data": {"id": "db1", "name": "test_1"}})

        with _client(handler) as client:
            with self.assertRaises(ApiError) as cm:
                list_databases(client, "tok", "proj_1")

        self.assertEqual(cm.exception.status_code, 200)
        self.assertIn("unexpected response shape", str(cm.exception))


class TestCreateDatabase(unittest.TestCase):
    def test_posts_name_and_region(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json={
                "data": {"id": "db_9", "connectionString": "postgres://u:p@h/db"}
            })

        with _client(handler) as client:
            record = create_database(client, "tok", "proj_1", "pr_3_x", "eu-west-3")

        self.assertEqual(record, DatabaseRecord("db_9", "pr_3_x", "postgres://u:p@h/db"))
        request = seen[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.path, "/v1/projects/proj_1/databases")
        self.assertEqual(json.loads(request.content), {"name": "pr_3_x", "region": "eu-west-3"})
        self.assertEqual(request.headers["User-Agent"], "prisma-postgres-github-action")
        self.assertEqual(request.headers["Authorization"], "Bearer tok")

    def test_region_omitted_when_not_set(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json={
                "data": {"id": "db_9", "connectionString": "postgres://x"}
            })

        with _client(handler) as client:
            create_database(client, "tok", "proj_1", "test_1")

        self.assertEqual(json.loads(seen[0].content), {"name": "test_1"})

    def test_error_message_includes_status_reason_and_body(self):
        def handler(request):
            return httpx.Response(500, text="database quota exceeded")

        with _client(handler) as client:
            with self.assertRaises(ApiError) as cm:
                create_database(client, "tok", "proj_1", "test_1")

        self.assertEqual(
            str(cm.exception),
            "Failed to create database: 500 Internal Server Error - database quota exceeded",
        )

    def test_missing_connection_string_raises(self):
        def handler(request):
            return httpx.Response(201, json={"data": {"id": "db_9"}})

        with _client(handler) as client:
            with self.assertRaises(ApiError):
                create_database(client, "tok", "proj_1", "test_1")


class TestCreateConnectionString(unittest.TestCase):
    def test_default_label(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json={"data": {"connectionString": "postgres://fresh"}})

        with _client(handler) as client:
            result = create_connection_string(client, "tok", "db_1")

        self.assertEqual(result, "postgres://fresh")
        request = seen[0]
        self.assertEqual(request.url.path, "/v1/databases/db_1/connections")
        self.assertEqual(json.loads(request.content), {"name": "read_write_key"})
        self.assertNotIn("prisma-postgres-github-action", request.headers.get("User-Agent", ""))

    def test_custom_label(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json={"data": {"connectionString": "postgres://ro"}})

        with _client(handler) as client:
            create_connection_string(client, "tok", "db_1", label="ci_key")

        self.assertEqual(json.loads(seen[0].content), {"name": "ci_key"})

    def test_error_status(self):
        with _client(lambda request: httpx.Response(404, text="not found")) as client:
            with self.assertRaises(ApiError) as cm:
                create_connection_string(client, "tok", "db_missing")

        self.assertIn("Failed to create connection string: 404", str(cm.exception))
        self.assertIn("not found", str(cm.exception))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
