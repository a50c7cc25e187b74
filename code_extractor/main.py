"""Entry point for Code Extractor GUI application."""


def main(config_path=None):
    """Run the GUI application."""
    from tkinter import messagebox
    from code_extractor.gui.app import CodeExtractorApp

    try:
        app = CodeExtractorApp(config_path)
        app.run()
    except Exception as e:
        print(f"Error starting application: {e}")
        messagebox.showerror("Startup Error", f"Failed to start application:\n{str(e)}")


def headless_main(args) -> int:
    """Extract and export without the GUI. Returns exit code (0 = success)."""
    import os

    from code_extractor.config.manager import ConfigManager
    from code_extractor.core.session import SessionState
    from code_extractor.excel.export import ExportError

    config_manager = ConfigManager(getattr(args, "config", None))

    input_path = getattr(args, "input", None)
    if not input_path or not os.path.isfile(input_path):
        print(f"ERROR: Input file not found: {input_path!r}. Use --input to specify.")
        return 1

    session = SessionState(
        export_filename=config_manager.get("export_filename"),
        sheet_name=config_manager.get("sheet_name"),
        log_callback=print,
    )
    session.select_file(input_path)
    if not session.extract():
        return 1

    try:
        for value in getattr(args, "remove", None) or []:
            if not session.remove_code(value):
                print(f"  {value} not in list, nothing removed")
    except ExportError as e:
        print(f"ERROR: {e}")
        return 1

    if not session.has_artifact:
        print("No codes found; nothing to export.")
        return 0

    output_dir = getattr(args, "output", None) or config_manager.get_output_dir()
    try:
        session.download(output_dir)
    except ExportError as e:
        print(f"ERROR: {e}")
        return 1
    print(f"Done. {len(session.codes)} codes exported.")
    return 0


if __name__ == "__main__":
    main()
