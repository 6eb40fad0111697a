#!/usr/bin/env python3
"""Testhelper CLI for ephemeral keys interoperability testing.

Reads a JSON request from stdin and prints a JSON result. Keys live in
``$EPHEMERAL_KEYS_PATH/ephemeral-keys``.
"""

import asyncio
import json
import os
import sys

from ephemeral_keys import BoxOptions, EphemeralKeysClient, EphemeralKeysError


async def generate(client: EphemeralKeysClient) -> None:
    """Generate a keypair and output its public key."""
    data = json.loads(sys.stdin.read())
    public_key = await client.generate_and_store(data["id"])
    print(json.dumps({"publicKey": public_key}))


async def box(client: EphemeralKeysClient) -> None:
    """Box a message to a public key."""
    data = json.loads(sys.stdin.read())
    ciphertext = await client.box_message(
        data["message"],
        data["publicKey"],
        BoxOptions(context=data.get("context")),
    )
    print(json.dumps({"ciphertext": ciphertext}))


async def unbox(client: EphemeralKeysClient) -> None:
    """Unbox a ciphertext with a stored keypair."""
    data = json.loads(sys.stdin.read())
    plaintext = await client.unbox_message(
        data["id"],
        data["ciphertext"],
        BoxOptions(context=data.get("context")),
    )
    print(json.dumps({"message": plaintext.decode("utf-8")}))


async def delete(client: EphemeralKeysClient) -> None:
    """Delete a stored keypair."""
    data = json.loads(sys.stdin.read())
    await client.delete_keypair(data["id"])
    print(json.dumps({"success": True}))


COMMANDS = {
    "generate": generate,
    "box": box,
    "unbox": unbox,
    "delete": delete,
}


async def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <command>", file=sys.stderr)
        sys.exit(1)

    command = COMMANDS.get(sys.argv[1])
    if command is None:
        print(f"unknown command: {sys.argv[1]}", file=sys.stderr)
        sys.exit(1)

    async with EphemeralKeysClient(path=os.environ["EPHEMERAL_KEYS_PATH"]) as client:
        try:
            await command(client)
        except EphemeralKeysError as e:
            print(json.dumps({"error": type(e).__name__, "message": str(e)}))
            sys.exit(2)


if __name__ == "__main__":
    asyncio.run(main())
