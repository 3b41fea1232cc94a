"""Anonymize an exported poll document.

Replaces every voter identity in the document's votes with a fake user name
generated by faker with a fixed seed, and writes an anonymized copy. The
proposals and the rankings themselves are left untouched, so the anonymized
poll tallies exactly like the original.

Usage:
    python scripts/anonymize_poll.py exported-poll.json
    python scripts/anonymize_poll.py exported-poll.json -o output.json
"""

import argparse
import json
from pathlib import Path

from faker import Faker

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"
DEFAULT_OUTPUT = FIXTURES_DIR / "poll.json"

SEED = 20260201


def discover_voters(document: dict) -> list[str]:
    """Return the distinct voter identities in vote order."""
    voters: list[str] = []
    for vote in document.get("votes", []):
        if isinstance(vote, dict) and vote.get("user") and vote["user"] not in voters:
            voters.append(vote["user"])
    return voters


def generate_fake_users(voters: list[str], seed: int) -> dict[str, str]:
    """Generate a mapping of real voter identities to fake ones.

    Identities keep their wiki prefix (e.g. "XWiki.") so the anonymized
    document still looks like a real export.
    """
    fake = Faker(["en_US", "en_GB", "de_DE", "fr_FR"])
    Faker.seed(seed)

    mapping: dict[str, str] = {}
    used: set[str] = set(voters)
    for voter in voters:
        prefix = voter.rsplit(".", 1)[0] + "." if "." in voter else ""
        fake_user = prefix + fake.user_name()
        while fake_user in used:
            fake_user = prefix + fake.user_name()
        used.add(fake_user)
        mapping[voter] = fake_user

    return mapping


def apply_replacements(document: dict, mapping: dict[str, str]) -> dict:
    """Return a copy of the document with voter identities replaced."""
    result = dict(document)
    result["votes"] = [
        {**vote, "user": mapping.get(vote.get("user"), vote.get("user"))}
        if isinstance(vote, dict) else vote
        for vote in document.get("votes", [])
    ]
    return result


def main():
    parser = argparse.ArgumentParser(
        description="Anonymize an exported poll document")
    parser.add_argument("input", help="Path to the exported poll JSON file")
    parser.add_argument("-o", "--output", default=str(DEFAULT_OUTPUT),
                        help=f"Output path (default: {DEFAULT_OUTPUT})")
    args = parser.parse_args()

    document = json.loads(Path(args.input).read_text(encoding="utf-8"))

    voters = discover_voters(document)
    print(f"Found {len(voters)} voters")

    mapping = generate_fake_users(voters, SEED)

    for original, fake in mapping.items():
        print(f"  {original} -> {fake}")

    result = apply_replacements(document, mapping)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(result, indent=2, ensure_ascii=False) + "\n",
                           encoding="utf-8")
    print(f"Written to {output_path}")


if __name__ == "__main__":
    main()
