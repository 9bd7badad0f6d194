"""
Script untuk generate signing secret yang aman untuk UserAuth API.
Usage: python scripts/generate_keys.py [--write]
"""

import secrets
import sys
from pathlib import Path


def generate_secret_key(num_bytes: int = 64) -> str:
    """Generate random URL-safe secret key."""
    return secrets.token_urlsafe(num_bytes)


def update_env_file(secret_key: str, env_path: Path = Path(".env")) -> None:
    """Set SECRET_KEY di file .env jika belum ada atau masih kosong."""
    lines = env_path.read_text().splitlines(keepends=True) if env_path.exists() else []

    updated_lines = []
    found = False
    for line in lines:
        if line.startswith("SECRET_KEY="):
            found = True
            current = line.split("=", 1)[1].strip().strip('"')
            if current:
                print("SECRET_KEY already set, keeping existing value")
                updated_lines.append(line)
                continue
            updated_lines.append(f'SECRET_KEY="{secret_key}"\n')
            print("Updated SECRET_KEY")
        else:
            updated_lines.append(line)

    if not found:
        updated_lines.append(f'SECRET_KEY="{secret_key}"\n')
        print("Added SECRET_KEY")

    env_path.write_text("".join(updated_lines))
    print(f"Updated .env file: {env_path}")


def main():
    """Main function."""
    secret_key = generate_secret_key()

    if "--write" in sys.argv[1:]:
        update_env_file(secret_key)
    else:
        print(f'SECRET_KEY="{secret_key}"')

    print("\nIMPORTANT: Keep this key secret. Rotating it invalidates every issued token.")


if __name__ == "__main__":
    main()
