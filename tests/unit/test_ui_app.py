import unittest
from unittest.mock import MagicMock

from ledger_pro.api.schemas import Transaction
from ledger_pro.ui.app import record_count_label, transaction_rows


class UiAppTest(unittest.TestCase):
    def test_transaction_rows_format_cells(self) -> None:
        rows = transaction_rows(
            [
                Transaction.model_validate(
                    {
                        "_id": "t1",
                        "dateOfEntry": "2024-01-05",
                        "reference": "INV-001",
                        "debit": 1500,
                        "balance": 1500,
                    }
                )
            ]
        )
        self.assertEqual(
            rows,
            [
                {
                    "Date": "Jan 5, 2024",
                    "Reference": "INV-001",
                    "Description": "—",
                    "Debit": "1,500.00",
                    "Credit": "0.00",
                    "Due On": "—",
                    "Remarks": "—",
                    "Balance": "1,500.00",
                }
            ],
        )

    def test_record_count_label(self) -> None:
        workspace = MagicMock()
        workspace.transactions.return_value = []
        self.assertEqual(record_count_label(workspace), "0 records")
        workspace.transactions.return_value = [object(), object()]
        self.assertEqual(record_count_label(workspace), "2 records")


if __name__ == "__main__":
    unittest.main()
