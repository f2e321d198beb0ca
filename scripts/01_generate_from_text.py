from __future__ import annotations

from markov_text import build_model_from_text, generate_text


def main() -> None:
    text = (
        "the man ate the pasta and the man ran home. "
        "the dog ate the bone and the dog ran away. "
    )

    model = build_model_from_text(text, seed=42)
    for _ in range(3):
        print(generate_text(model, 20, reset_first=True))


if __name__ == "__main__":
    main()
