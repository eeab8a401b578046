# scripts/test/simulate_movement.py
"""
Register an entry or exit against a running backend, the way the gate
client does it. On 409 the conflict is printed and, with --force, the
movement is resent with forceCorrection=true.

Usage:
  python scripts/test/simulate_movement.py --plate ABC1D23 --type saida --km 1520 --driver TALES
  python scripts/test/simulate_movement.py --plate ABC1D23 --type saida --force
"""

import argparse
import requests
from datetime import datetime, timezone

BACKEND_URL = "http://localhost:8080/api"


def find_vehicle(base_url, plate, headers):
    resp = requests.get(f"{base_url}/veiculos/placa/{plate}", headers=headers, timeout=10)
    if resp.status_code == 404:
        return None
    resp.raise_for_status()
    return resp.json()


def register_vehicle(base_url, plate, headers):
    resp = requests.post(f"{base_url}/veiculos", json={"placa": plate, "modelo": "SIM", "marca": "SIM"},
                         headers=headers, timeout=10)
    resp.raise_for_status()
    print(f"🆕 Registered vehicle {plate}")
    return resp.json()


def send_movement(base_url, vehicle, args, headers, force=False):
    payload = {
        "veiculo": {"id": vehicle["id"]},
        "tipoMovimento": args.type,
        "quilometragem": args.km,
        "motorista": args.driver,
        "porteiro": args.guard,
        "dataHora": datetime.now(timezone.utc).isoformat(),
        "forceCorrection": force,
    }
    return requests.post(f"{base_url}/movimentacoes", json=payload, headers=headers, timeout=10)


def main():
    parser = argparse.ArgumentParser(description="Simulate a gate movement")
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--plate", required=True)
    parser.add_argument("--type", choices=["entrada", "saida"], required=True)
    parser.add_argument("--km", type=float, default=None)
    parser.add_argument("--driver", default="JOAQUIM")
    parser.add_argument("--guard", default="PORTARIA")
    parser.add_argument("--force", action="store_true", help="Confirm auto-correction on conflict")
    parser.add_argument("--api-key", default=None)
    args = parser.parse_args()

    headers = {"X-API-Key": args.api_key} if args.api_key else {}
    vehicle = find_vehicle(args.url, args.plate, headers) or register_vehicle(args.url, args.plate, headers)

    resp = send_movement(args.url, vehicle, args, headers)
    if resp.status_code == 409:
        conflict = resp.json()
        print(f"⚠️  409 {conflict['message']} (suggested: {conflict['suggestedAction']})")
        if not args.force:
            print("   Re-run with --force to confirm the correction")
            return
        resp = send_movement(args.url, vehicle, args, headers, force=True)

    print(f"✅ {args.type} → HTTP {resp.status_code}: {resp.json()}")


if __name__ == "__main__":
    main()
