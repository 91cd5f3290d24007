"""
Run the permit re-evaluation job once (the same job the scheduler runs daily).

Valid and near-expiry boarding houses whose permit status has moved (e.g. valid -> near-expiry,
near-expiry -> expired) are re-verified and their owners notified.

Usage (from project root):
  python scripts/reevaluate_permits.py
  python scripts/reevaluate_permits.py --date 2026-01-31
  python scripts/reevaluate_permits.py --dry-run
"""
import os
import sys
import argparse
from datetime import date

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy.orm import Session
from app.config import get_settings
from app.database import SessionLocal
from app.models.boarding_house import BoardingHouse
from app.services.compliance import REEVALUATED_STATUSES, reevaluate_permits
from app.services.permits import evaluate_permit_status, parse_calendar_date


def main():
    parser = argparse.ArgumentParser(description="Re-evaluate permit status of verified boarding houses")
    parser.add_argument("--date", type=str, default=None, help="Evaluate as of this date (YYYY-MM-DD); default today")
    parser.add_argument("--dry-run", action="store_true", help="Only print what would change")
    args = parser.parse_args()

    on = parse_calendar_date(args.date, "--date") if args.date else date.today()
    window = get_settings().permit_near_expiry_days

    db: Session = SessionLocal()
    try:
        if args.dry_run:
            houses = db.query(BoardingHouse).filter(BoardingHouse.permit_status.in_(REEVALUATED_STATUSES)).all()
            for h in houses:
                status = evaluate_permit_status(h.permit_issue_date, h.permit_expiry_date, on, window_days=window)
                if status != h.permit_status:
                    print(f"  would change: {h.name} (id={h.id}) {h.permit_status.value} -> {status.value}")
            print(f"Dry run as of {on}: checked {len(houses)} boarding house(s).")
            return 0

        checked, changed = reevaluate_permits(db, today=on)
        print(f"Re-evaluated as of {on}: checked {checked}, changed {len(changed)} {changed}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main() or 0)
