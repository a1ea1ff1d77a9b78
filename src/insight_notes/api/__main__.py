import logging
import os

from insight_notes.api.http_server import create_server
from insight_notes.api.service import InsightService


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("INSIGHT_NOTES_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    vault_root = os.environ.get("INSIGHT_NOTES_VAULT", ".")
    port = int(os.environ.get("INSIGHT_NOTES_PORT", "8000"))
    service = InsightService(vault_root, persist_config=True)
    server = create_server(service, host="127.0.0.1", port=port)
    logging.getLogger(__name__).info("Insight Notes API listening on http://127.0.0.1:%d", port)
    server.serve_forever()


if __name__ == "__main__":
    main()
