from design_patterns.main.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
