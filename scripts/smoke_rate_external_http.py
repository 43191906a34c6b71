import os, sys, json
from fastapi.testclient import TestClient
from conversor.main import create_app
from conversor.core.config import Settings

"""Smoke test for the external-http provider.
Starts the app once with the real provider and once with the static one, then
prints the rate state and a USD -> ARS conversion from each (or the failure).
"""


def run():
    out = {}
    for kind in ("external-http", "static"):
        app = create_app(settings_override=Settings(exchange_rate_provider=kind))
        with TestClient(app) as client:
            rates = client.get("/api/rates").json()
            conv = client.post(
                "/api/convert",
                json={"amount": "10", "from_currency": "USD", "to_currency": "ARS"},
            ).json()
        out[kind] = {"rates": rates, "convert": conv}
    print(json.dumps(out, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
