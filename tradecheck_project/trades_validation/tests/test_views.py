import json
from unittest.mock import patch

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APISimpleTestCase

from trades_validation.services.pipeline import ValidationReport
from trades_validation.views import SUCCESS_MESSAGE

from .test_usecases import option_record, spot_record


class TestTradeValidationViewSet(APISimpleTestCase):
    def setUp(self):
        self.url = reverse("trade-validate")

    def test_valid_batch_returns_success_message(self):
        res = self.client.post(self.url, [spot_record(), option_record()], format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, SUCCESS_MESSAGE)

    def test_violations_returned_in_order(self):
        batch = [
            spot_record(),
            spot_record(valueDate="2016-08-13", customer="Touraj"),
            option_record(payCcy="XYZ"),
        ]
        res = self.client.post(self.url, batch, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.json(),
            [
                {"ErrorType": "valueDateFallinWeekend", "TradeNumber": 2},
                {"ErrorType": "CustomerNotValid", "TradeNumber": 2},
                {"ErrorType": "payCcyNotValidISO4217", "TradeNumber": 3},
            ],
        )

    def test_unrecognized_type_with_known_customer_passes(self):
        swap = {"type": "Swap", "customer": "PLUTO2", "tradeDate": "2016-08-13"}
        res = self.client.post(self.url, [swap], format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, SUCCESS_MESSAGE)

    def test_unrecognized_type_only_reports_customer(self):
        swap = {"type": "Swap", "customer": "Touraj", "valueDate": "2016-08-13", "payCcy": "XYZ"}
        res = self.client.post(self.url, [spot_record(), swap], format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json(), [{"ErrorType": "CustomerNotValid", "TradeNumber": 2}])

    def test_plain_text_body_accepted(self):
        body = json.dumps([spot_record(customer="Touraj")])
        res = self.client.post(self.url, body, content_type="text/plain")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json(), [{"ErrorType": "CustomerNotValid", "TradeNumber": 1}])

    def test_validatetrades_route(self):
        body = json.dumps([spot_record()])
        res = self.client.post(reverse("validatetrades"), body, content_type="text/plain")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, SUCCESS_MESSAGE)

    def test_invalid_json_400(self):
        res = self.client.post(self.url, "[{not json", content_type="text/plain")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", res.data)

    def test_invalid_json_content_type_400(self):
        res = self.client.post(self.url, "[{not json", content_type="application/json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", res.data)

    def test_body_not_a_list_400(self):
        res = self.client.post(self.url, spot_record(), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", res.data)

    def test_missing_field_aborts_whole_batch_400(self):
        bad = option_record()
        del bad["premiumDate"]
        res = self.client.post(self.url, [spot_record(customer="Touraj"), bad], format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(list(res.data["errors"]), ["2"])
        self.assertIn("premiumDate", res.data["errors"]["2"])

    def test_get_not_allowed(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    @patch("trades_validation.views.validate_trades")
    def test_passes_body_to_use_case(self, mock_validate):
        mock_validate.return_value = ValidationReport()
        batch = [spot_record()]
        res = self.client.post(self.url, batch, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        (payload,), _ = mock_validate.call_args
        self.assertEqual(payload, batch)

    @patch("trades_validation.views.validate_trades")
    def test_unexpected_error_500(self, mock_validate):
        mock_validate.side_effect = RuntimeError("boom")
        with self.assertLogs("trades_validation.views", level="ERROR"):
            res = self.client.post(self.url, [spot_record()], format="json")
        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data["detail"], "Internal error: boom")
