from time_reports.cli import app

if __name__ == "__main__":
    app(prog_name="time-reports")
