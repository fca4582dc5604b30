import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

# Keep API tests deterministic and fast by default.
os.environ["HISTORY_BACKEND"] = "memory"
os.environ["REPLY_DELAY_MS"] = "0"
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ.pop("API_KEY", None)
os.environ.pop("CATALOG_PATH", None)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from zudora.ai.errors import AIServiceError  # noqa: E402
from zudora.api.deps import get_session_controller  # noqa: E402
from zudora.intent import replies  # noqa: E402
from zudora.main import app  # noqa: E402


class HealthAndChatApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_chat_with_score_and_category(self):
        response = self.client.post("/v1/chat", json={"message": "I scored 185 marks in BC category"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["intent"], "suggestions")
        self.assertEqual(len(body["suggestions"]), 10)
        cutoffs = [s["cutoff"] for s in body["suggestions"]]
        self.assertEqual(cutoffs, sorted(cutoffs, reverse=True))
        self.assertTrue(all(cutoff <= 185 for cutoff in cutoffs))
        self.assertEqual(
            set(body["suggestions"][0]),
            {"college_name", "branch_name", "cutoff", "address"},
        )

    def test_chat_without_suggestions_omits_field(self):
        response = self.client.post("/v1/chat", json={"message": "hello"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["content"], replies.GREETING)
        self.assertNotIn("suggestions", body)

    def test_chat_no_match(self):
        response = self.client.post("/v1/chat", json={"message": "My cutoff is 50 and I'm in OC category"})
        body = response.json()
        self.assertEqual(body["intent"], "no_match")
        self.assertNotIn("suggestions", body)

    def test_chat_empty_message_gets_help(self):
        response = self.client.post("/v1/chat", json={"message": ""})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["content"], replies.HELP)


class CollegeMatchApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_match_endpoint(self):
        response = self.client.get("/v1/colleges/match", params={"score": 199.5, "category": "oc", "limit": 3})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["category"], "OC")
        self.assertEqual(len(body["suggestions"]), 3)
        self.assertEqual(body["suggestions"][0]["cutoff"], 199.5)

    def test_unknown_category_rejected(self):
        response = self.client.get("/v1/colleges/match", params={"score": 180, "category": "xx"})
        self.assertEqual(response.status_code, 422)

    def test_score_out_of_range_rejected(self):
        response = self.client.get("/v1/colleges/match", params={"score": 250, "category": "BC"})
        self.assertEqual(response.status_code, 422)


class SessionApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        get_session_controller().delete_history()

    def _new_session(self) -> dict:
        response = self.client.post("/v1/sessions")
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_session_flow(self):
        session = self._new_session()
        self.assertEqual(len(session["messages"]), 1)
        self.assertEqual(session["messages"][0]["content"], replies.WELCOME)
        self.assertFalse(session["pending"])

        response = self.client.post(
            f"/v1/sessions/{session['id']}/messages",
            json={"message": "I scored 185 marks in BC category"},
        )
        self.assertEqual(response.status_code, 200)
        exchange = response.json()
        self.assertEqual(exchange["user"]["role"], "user")
        self.assertEqual(exchange["assistant"]["role"], "assistant")
        self.assertTrue(exchange["assistant"]["suggestions"])

        current = self.client.get(f"/v1/sessions/{session['id']}").json()
        self.assertEqual([m["role"] for m in current["messages"]], ["assistant", "user", "assistant"])

        reset = self.client.post(f"/v1/sessions/{session['id']}/reset").json()
        self.assertEqual(reset["saved"]["title"], "I scored 185 marks in BC categ...")
        self.assertEqual(len(reset["session"]["messages"]), 1)

        history = self.client.get("/v1/history").json()
        self.assertEqual([entry["title"] for entry in history], ["I scored 185 marks in BC categ..."])

        self.assertEqual(self.client.delete("/v1/history").status_code, 204)
        self.assertEqual(self.client.get("/v1/history").json(), [])

    def test_reset_of_fresh_session_saves_nothing(self):
        session = self._new_session()
        reset = self.client.post(f"/v1/sessions/{session['id']}/reset").json()
        self.assertIsNone(reset["saved"])
        self.assertEqual(self.client.get("/v1/history").json(), [])

    def test_unknown_session(self):
        self.assertEqual(self.client.get("/v1/sessions/nope").status_code, 404)
        response = self.client.post("/v1/sessions/nope/messages", json={"message": "hi"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.client.post("/v1/sessions/nope/reset").status_code, 404)

    def test_end_session(self):
        session = self._new_session()
        self.assertEqual(self.client.delete(f"/v1/sessions/{session['id']}").status_code, 204)
        self.assertEqual(self.client.get(f"/v1/sessions/{session['id']}").status_code, 404)
        self.assertEqual(self.client.delete(f"/v1/sessions/{session['id']}").status_code, 404)

    def test_blank_message_rejected(self):
        session = self._new_session()
        response = self.client.post(f"/v1/sessions/{session['id']}/messages", json={"message": "   "})
        self.assertEqual(response.status_code, 400)

    def test_pending_session_rejects_second_message(self):
        session = self._new_session()
        live = get_session_controller().get_session(session["id"])
        live.pending = True
        try:
            response = self.client.post(f"/v1/sessions/{session['id']}/messages", json={"message": "hello"})
            self.assertEqual(response.status_code, 409)
        finally:
            live.pending = False


class _FakeSpeech:
    async def synthesize(self, text, voice):
        return b"ID3" + text.encode("utf-8")


class _FailingCompletion:
    async def complete(self, message):
        raise AIServiceError("Failed to process with OpenAI")


class VoiceApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_unconfigured_capabilities_report_unavailable(self):
        with patch.dict(os.environ, {}, clear=False):
            for name in ("OPENAI_API_KEY", "ELEVENLABS_API_KEY", "VAPI_API_KEY"):
                os.environ.pop(name, None)
            speech = self.client.post("/v1/speech", json={"text": "Hello"})
            voice = self.client.post("/v1/voice/sessions", json={"assistant_id": "asst_1"})
            assist = self.client.post("/v1/assist", json={"message": "Which college?"})
        for response in (speech, voice, assist):
            self.assertEqual(response.status_code, 503)
            self.assertTrue(response.json()["detail"])

    def test_speech_returns_audio(self):
        with patch("zudora.ai.factory.get_speech_client", return_value=_FakeSpeech()):
            response = self.client.post("/v1/speech", json={"text": "Hello"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["content-type"], "audio/mpeg")
        self.assertEqual(response.content, b"ID3Hello")

    def test_provider_failure_is_bad_gateway(self):
        with patch("zudora.ai.factory.get_completion_client", return_value=_FailingCompletion()):
            response = self.client.post("/v1/assist", json={"message": "Which college?"})
        self.assertEqual(response.status_code, 502)


class LifespanTests(unittest.TestCase):
    def test_history_store_closed_on_shutdown(self):
        controller = get_session_controller()
        with patch.object(controller, "close") as close:
            with TestClient(app) as client:
                self.assertEqual(client.get("/v1/health").status_code, 200)
                close.assert_not_called()
            close.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
