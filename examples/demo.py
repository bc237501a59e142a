#!/usr/bin/env python3
"""
Inscrib3 Demo - Create a drop, upload its files and mint one item
"""

import argparse
import asyncio
from pathlib import Path

from inscrib3_client import Credentials, Inscrib3Client


async def demo(args):
    """Walk through the drop lifecycle against a live backend"""

    print("Inscrib3 Demo - Drop lifecycle")
    print("=" * 60)

    creds = Credentials(args.address, args.message, args.signature)

    async with Inscrib3Client(
        network=args.network,
        chain=args.chain,
        base_url=args.api
    ) as client:
        print("\n1. Creating drop...")

        created = await client.drops.create(
            "Demo Drop",
            "DEMO",
            "Created by the Inscrib3 demo script",
            Path(args.icon),
            args.price,
            args.address,
            args.public_key,
            *creds
        )
        drop_id = created["id"]
        print(f"   Drop ID: {drop_id}")

        print("\n2. Uploading files...")

        result = await client.drops.uploads.update(
            drop_id,
            [Path(f) for f in args.files],
            *creds
        )
        print(f"   Supply: {result['supply']}")

        uploads = await client.drops.uploads.all(drop_id, *creds)
        for name in uploads["files"]:
            print(f"   - {name}")

        drop = await client.drops.read(drop_id, *creds)
        print(f"\n3. {drop['name']} ({drop['symbol']}): {drop['minted']}/{drop['supply']} minted")

        print("\n4. Requesting mint PSBT...")

        mint = await client.drops.mint(
            drop_id,
            args.address,
            args.public_key,
            args.address,
            args.public_key,
            *creds
        )
        for psbt in mint["psbt"]:
            print(f"   {psbt}")

        signed = input("\nPaste the signed PSBT(s), comma separated (empty to skip): ").strip()
        if signed:
            broadcast = await client.drops.broadcast_mint(
                drop_id,
                [p.strip() for p in signed.split(",")],
                *creds
            )
            print(f"   Broadcast! txid: {broadcast['txid']}")

        print("\n" + "=" * 60)
        print("Demo complete!")


def main():
    parser = argparse.ArgumentParser(description="Inscrib3 drops demo")
    parser.add_argument("address", help="Wallet address")
    parser.add_argument("public_key", help="Wallet public key")
    parser.add_argument("message", help="Signed challenge message")
    parser.add_argument("signature", help="Signature of the message")
    parser.add_argument("--icon", required=True, help="Icon image file")
    parser.add_argument("--files", nargs="+", required=True, help="Files to upload")
    parser.add_argument("--price", default="1000", help="Mint price in sats")
    parser.add_argument("--network", default="testnet", help="Bitcoin network")
    parser.add_argument("--chain", default="bitcoin", help="bitcoin or fractal")
    parser.add_argument("--api", default="https://api.inscrib3.com", help="API URL")

    args = parser.parse_args()

    try:
        asyncio.run(demo(args))
    except KeyboardInterrupt:
        print("\n\nDemo interrupted")


if __name__ == "__main__":
    main()
