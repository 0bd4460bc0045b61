"""Transaction log: in-memory history mirrored to an append-only CSV file"""

import threading
import pandas as pd
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
from paysim.constants import CSV_COLUMNS, DEFAULT_TRANSACTION_FILE
from paysim.models.transaction import TransactionRecord
from paysim.utils.errors import StorageError
from paysim.utils.logging import get_logger
from paysim.utils.metrics import transaction_log_writes, transaction_log_rows_skipped

logger = get_logger(__name__)


class TransactionLog:
    """
    Ordered history of checkout attempts.

    The log is the only owner of both the in-memory list and the CSV mirror.
    Appends are serialized with a lock so concurrent checkout workers never
    interleave rows. The file is re-read in full only at construction.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TRANSACTION_FILE, load: bool = True):
        """
        Initialize the transaction log

        Args:
            path: CSV file mirroring the history
            load: Load existing records from the file (default True)
        """
        self.path = Path(path)
        self._records: List[TransactionRecord] = []
        self._lock = threading.Lock()
        self.skipped_rows = 0

        if load:
            self.load_all()

    def __len__(self) -> int:
        return len(self._records)

    def append(self, record: TransactionRecord) -> bool:
        """
        Add a record to the history and mirror it to the file

        A write failure is logged and swallowed; the record stays in memory.

        Args:
            record: Completed transaction record

        Returns:
            True if the row reached the file
        """
        with self._lock:
            self._records.append(record)
            try:
                self._write_row(record)
            except StorageError as e:
                transaction_log_writes.labels(status='failure').inc()
                logger.error(
                    f"Error saving transaction: {e}",
                    transaction_id=record.transaction_id,
                    path=str(self.path)
                )
                return False

        transaction_log_writes.labels(status='success').inc()
        return True

    def _write_row(self, record: TransactionRecord) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            write_header = not self.path.exists() or self.path.stat().st_size == 0

            df = pd.DataFrame([record.to_row()], columns=CSV_COLUMNS)
            df.to_csv(self.path, mode='a', header=write_header, index=False, encoding='utf-8')
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def load_all(self) -> int:
        """
        Replace the in-memory history with the contents of the file

        Malformed rows are skipped and counted in `skipped_rows`. An unreadable
        file is logged and leaves the history empty.

        Returns:
            Number of records loaded
        """
        with self._lock:
            self._records = []
            self.skipped_rows = 0

            if not self.path.exists():
                logger.info("No transaction file yet, starting empty", path=str(self.path))
                return 0

            try:
                df = self._read_csv()
            except StorageError as e:
                logger.error(f"Error loading transaction history: {e}", path=str(self.path))
                return 0

            for row in df.to_dict(orient='records'):
                try:
                    self._records.append(TransactionRecord.from_row(row))
                except ValueError as e:
                    self._skip(f"Skipping malformed transaction row: {e}", row.get("TransactionID"))

            logger.info(
                f"Loaded {len(self._records)} transactions",
                path=str(self.path),
                skipped=self.skipped_rows
            )
            return len(self._records)

    def _read_csv(self) -> pd.DataFrame:
        try:
            df = pd.read_csv(
                self.path,
                header=0,
                names=CSV_COLUMNS,
                dtype=str,
                keep_default_na=False,
                engine='python',
                on_bad_lines=self._on_bad_line,
                encoding='utf-8'
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=CSV_COLUMNS)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        # Short rows come back padded with NaN
        return df.astype(object).where(pd.notna(df), None)

    def _on_bad_line(self, fields: List[str]) -> None:
        self._skip(f"Skipping transaction row with {len(fields)} fields", fields[0] if fields else None)
        return None

    def _skip(self, message: str, transaction_id: Optional[str]) -> None:
        self.skipped_rows += 1
        transaction_log_rows_skipped.inc()
        logger.warning(message, transaction_id=transaction_id, path=str(self.path))

    def records(self) -> Tuple[TransactionRecord, ...]:
        """Read-only snapshot of all records in append order"""
        with self._lock:
            return tuple(self._records)

    def successful_count(self) -> int:
        """Number of SUCCESS records"""
        return sum(1 for record in self.records() if record.is_successful)

    def total_revenue(self) -> Decimal:
        """Sum of amounts (not totals) over SUCCESS records"""
        return sum((record.amount for record in self.records() if record.is_successful), Decimal("0.00"))

    def fees_collected(self) -> Decimal:
        """Sum of fees over SUCCESS records"""
        return sum((record.fee for record in self.records() if record.is_successful), Decimal("0.00"))

    def summary(self) -> Dict[str, Any]:
        """Summary statistics for display"""
        total = len(self.records())
        successful = self.successful_count()
        return {
            'total_transactions': total,
            'successful': successful,
            'failed': total - successful,
            'total_revenue': self.total_revenue(),
            'fees_collected': self.fees_collected(),
            'path': str(self.path)
        }

    def to_dataframe(self) -> pd.DataFrame:
        """History as a DataFrame, one row per record"""
        records = self.records()
        if not records:
            return pd.DataFrame(columns=list(TransactionRecord.model_fields))

        df = pd.DataFrame([record.model_dump() for record in records])
        df['status'] = df['status'].map(lambda status: status.value)
        return df
