"""Generate a new integration API key.

Usage:
    fitness-generate-api-key
"""

from fitness_events_api.app.core.security import generate_api_key


def main() -> None:
    api_key = generate_api_key()
    print("Generated API key:")
    print(api_key)
    print("\nAdd this to your .env file:")
    print(f"API_KEY={api_key}")


if __name__ == "__main__":
    main()
