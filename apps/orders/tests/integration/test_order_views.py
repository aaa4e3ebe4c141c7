from decimal import Decimal
from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.gigs.models import Gig
from apps.notifications.models import Notification
from apps.orders.models import Order
from apps.orders.tests.factories import GigFactory, OrderFactory, UserFactory


class OrderCreationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = UserFactory()
        self.freelancer = UserFactory()
        self.gig = GigFactory(created_by=self.freelancer, price=Decimal("40.00"))
        self.url = reverse("create_order")

    def test_create_order_snapshots_price_and_notifies_owner(self):
        self.client.force_authenticate(user=self.buyer)
        response = self.client.post(self.url, {"gigId": self.gig.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["message"], "Order placed successfully!")

        order = Order.objects.get()
        self.assertEqual(order.client, self.buyer)
        self.assertEqual(order.freelancer, self.freelancer)
        self.assertEqual(order.amount, Decimal("40.00"))
        self.assertEqual(order.status, "pending")

        notifications = Notification.objects.filter(type="new_order")
        self.assertEqual(notifications.count(), 1)
        notification = notifications.get()
        self.assertEqual(notification.user, self.freelancer)
        self.assertEqual(notification.order, order)
        self.assertEqual(notification.gig, self.gig)
        self.assertEqual(notification.sender, self.buyer)
        self.assertEqual(
            notification.message,
            f'You have received a new order for "{self.gig.title}" from {self.buyer.display_name}'
        )

    def test_amount_is_not_rederived_after_price_change(self):
        self.client.force_authenticate(user=self.buyer)
        self.client.post(self.url, {"gigId": self.gig.id}, format="json")

        Gig.objects.filter(pk=self.gig.pk).update(price=Decimal("99.00"))

        order = Order.objects.get()
        self.assertEqual(order.amount, Decimal("40.00"))
        response = self.client.get(reverse("order_detail", args=[order.id]))
        self.assertEqual(response.data["data"]["amount"], "40.00")

    def test_create_order_increments_gig_order_counter(self):
        self.client.force_authenticate(user=self.buyer)
        self.client.post(self.url, {"gigId": self.gig.id}, format="json")
        self.client.post(self.url, {"gigId": self.gig.id}, format="json")

        self.gig.refresh_from_db()
        self.assertEqual(self.gig.orders, 2)

    def test_missing_gig_id_is_invalid_input(self):
        self.client.force_authenticate(user=self.buyer)
        response = self.client.post(self.url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])
        self.assertIn("Gig ID is required", response.data["message"])

    def test_unknown_gig_is_not_found(self):
        self.client.force_authenticate(user=self.buyer)
        response = self.client.post(self.url, {"gigId": 999999}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"success": False, "message": "Gig not found"})
        self.assertEqual(Order.objects.count(), 0)

    def test_gig_without_owner_is_invalid_state(self):
        orphan = GigFactory(created_by=None)
        self.client.force_authenticate(user=self.buyer)
        response = self.client.post(self.url, {"gigId": orphan.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Gig creator information missing")
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(Notification.objects.count(), 0)

    def test_owner_cannot_order_own_gig(self):
        self.client.force_authenticate(user=self.freelancer)
        response = self.client.post(self.url, {"gigId": self.gig.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Order.objects.count(), 0)

    def test_requires_authentication(self):
        response = self.client.post(self.url, {"gigId": self.gig.id}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["success"])


class BatchOrderCreationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = UserFactory()
        self.gig_a = GigFactory(price=Decimal("10.00"))
        self.gig_b = GigFactory(price=Decimal("20.00"))
        self.url = reverse("create_orders")
        self.client.force_authenticate(user=self.buyer)

    def test_skips_unknown_gigs_and_creates_the_rest(self):
        response = self.client.post(
            self.url, {"gigIds": [self.gig_a.id, self.gig_b.id, 999999]}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "2 order(s) placed successfully!")
        self.assertEqual(len(response.data["data"]), 2)
        self.assertEqual(Order.objects.filter(client=self.buyer).count(), 2)
        self.assertEqual(
            set(Order.objects.values_list("amount", flat=True)),
            {Decimal("10.00"), Decimal("20.00")}
        )
        self.assertEqual(Notification.objects.filter(type="new_order").count(), 2)

    def test_skips_gigs_without_owner(self):
        orphan = GigFactory(created_by=None)
        response = self.client.post(self.url, {"gigIds": [orphan.id, self.gig_a.id]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Order.objects.count(), 1)
        self.assertEqual(Order.objects.get().gig, self.gig_a)

    def test_skips_malformed_ids(self):
        response = self.client.post(self.url, {"gigIds": ["not-an-id", self.gig_b.id]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Order.objects.count(), 1)

    def test_booleans_and_floats_are_not_gig_ids(self):
        response = self.client.post(
            self.url, {"gigIds": [True, float(self.gig_a.id), self.gig_b.id]}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(list(Order.objects.values_list("gig_id", flat=True)), [self.gig_b.id])

    def test_only_boolean_entries_create_nothing(self):
        GigFactory()
        response = self.client.post(self.url, {"gigIds": [True, False]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Order.objects.count(), 0)

    def test_numeric_string_ids_are_accepted(self):
        response = self.client.post(self.url, {"gigIds": [str(self.gig_a.id)]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Order.objects.get().gig, self.gig_a)

    def test_all_invalid_fails_and_creates_nothing(self):
        orphan = GigFactory(created_by=None)
        response = self.client.post(self.url, {"gigIds": [999998, 999999, orphan.id]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "No valid gigs found to create orders")
        self.assertEqual(Order.objects.count(), 0)
        self.assertEqual(Notification.objects.count(), 0)

    def test_empty_list_is_invalid_input(self):
        response = self.client.post(self.url, {"gigIds": []}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Gig IDs array is required", response.data["message"])

    def test_non_list_is_invalid_input(self):
        response = self.client.post(self.url, {"gigIds": self.gig_a.id}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Order.objects.count(), 0)


class OrderTransitionTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = UserFactory()
        self.freelancer = UserFactory()
        self.outsider = UserFactory()
        self.gig = GigFactory(created_by=self.freelancer, title="Landing page copy")
        self.order = OrderFactory(gig=self.gig, client=self.buyer)

    def _accept(self, user):
        self.client.force_authenticate(user=user)
        return self.client.patch(reverse("order_accept", args=[self.order.id]), format="json")

    def _reject(self, user, data=None):
        self.client.force_authenticate(user=user)
        return self.client.patch(reverse("order_reject", args=[self.order.id]), data or {}, format="json")

    def _set_status(self, user, value):
        self.client.force_authenticate(user=user)
        return self.client.patch(
            reverse("order_status_update", args=[self.order.id]), {"status": value}, format="json"
        )

    def test_accept_moves_to_in_progress_and_notifies_client(self):
        response = self._accept(self.freelancer)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Order accepted successfully")
        self.assertEqual(response.data["data"]["status"], "in-progress")
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "in-progress")

        notification = Notification.objects.get(type="order_accepted")
        self.assertEqual(notification.user, self.buyer)
        self.assertEqual(notification.sender, self.freelancer)
        self.assertEqual(
            notification.message,
            f'Your order for "Landing page copy" has been accepted by {self.freelancer.display_name}'
        )

    def test_accepting_twice_fails_without_second_notification(self):
        self._accept(self.freelancer)
        response = self._accept(self.freelancer)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Order is not in pending status")
        self.assertEqual(Notification.objects.filter(type="order_accepted").count(), 1)

    def test_reject_with_reason_appends_reason_verbatim(self):
        response = self._reject(self.freelancer, {"reason": "Fully booked until March"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "cancelled")
        notification = Notification.objects.get(type="order_rejected")
        self.assertEqual(notification.user, self.buyer)
        self.assertEqual(
            notification.message,
            f'Your order for "Landing page copy" has been rejected by '
            f'{self.freelancer.display_name}: Fully booked until March'
        )

    def test_reject_without_reason_has_no_trailing_clause(self):
        self._reject(self.freelancer)

        notification = Notification.objects.get(type="order_rejected")
        self.assertEqual(
            notification.message,
            f'Your order for "Landing page copy" has been rejected by {self.freelancer.display_name}'
        )

    def test_rejecting_twice_fails(self):
        self._reject(self.freelancer)
        response = self._reject(self.freelancer)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Notification.objects.filter(type="order_rejected").count(), 1)

    def test_cannot_reject_after_accept(self):
        self._accept(self.freelancer)
        response = self._reject(self.freelancer)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "in-progress")

    def test_client_cannot_accept_or_reject(self):
        self.assertEqual(self._accept(self.buyer).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self._reject(self.buyer).status_code, status.HTTP_403_FORBIDDEN)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "pending")
        self.assertEqual(Notification.objects.count(), 0)

    def test_outsider_is_forbidden_everywhere(self):
        self.assertEqual(self._accept(self.outsider).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self._reject(self.outsider).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self._set_status(self.outsider, "completed").status_code, status.HTTP_403_FORBIDDEN)
        self.client.force_authenticate(user=self.outsider)
        response = self.client.get(reverse("order_detail", args=[self.order.id]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(response.data["success"])

    def test_unknown_order_is_not_found(self):
        self.client.force_authenticate(user=self.freelancer)
        response = self.client.patch(reverse("order_accept", args=[999999]), format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Order not found")

    def test_generic_status_update_by_client_completes_order(self):
        response = self._set_status(self.buyer, "completed")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["status"], "completed")
        notification = Notification.objects.get(type="order_completed")
        self.assertEqual(notification.user, self.buyer)
        self.assertEqual(notification.sender, self.buyer)

    def test_generic_status_update_maps_notifications(self):
        self._set_status(self.freelancer, "in-progress")
        self._set_status(self.freelancer, "cancelled")
        self._set_status(self.freelancer, "pending")

        types = list(Notification.objects.order_by("id").values_list("type", flat=True))
        self.assertEqual(types, ["order_accepted", "order_rejected"])
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "pending")

    def test_generic_status_update_rejects_unknown_value(self):
        response = self._set_status(self.freelancer, "shipped")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Invalid status value", response.data["message"])
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "pending")

    def test_concurrent_transition_loses_compare_and_swap(self):
        stale = Order.objects.select_related("gig", "client", "freelancer").get(pk=self.order.pk)
        Order.objects.filter(pk=self.order.pk).update(status="in-progress")

        with patch("apps.orders.services.get_order", return_value=stale):
            response = self._reject(self.freelancer)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, "in-progress")
        self.assertEqual(Notification.objects.count(), 0)


class OrderListingTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.other = UserFactory()

        own_gig = GigFactory(created_by=self.user)
        self.bought = OrderFactory(client=self.user)
        self.sold = OrderFactory(gig=own_gig, client=self.other)
        self.unrelated = OrderFactory(client=self.other)
        self.client.force_authenticate(user=self.user)

    def test_my_orders_lists_both_roles_newest_first(self):
        response = self.client.get(reverse("my_orders"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [order["id"] for order in response.data["data"]]
        self.assertEqual(ids, [self.sold.id, self.bought.id])

    def test_freelancer_orders_lists_only_sold(self):
        response = self.client.get(reverse("freelancer_orders"))

        ids = [order["id"] for order in response.data["data"]]
        self.assertEqual(ids, [self.sold.id])

    def test_order_detail_resolves_participants(self):
        response = self.client.get(reverse("order_detail", args=[self.bought.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["gig"]["title"], self.bought.gig.title)
        self.assertEqual(data["client"]["id"], self.user.id)
        self.assertEqual(data["freelancer"]["id"], self.bought.freelancer.id)
        self.assertEqual(data["freelancer"]["name"], self.bought.freelancer.display_name)

    def test_order_detail_not_found(self):
        response = self.client.get(reverse("order_detail", args=[999999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
