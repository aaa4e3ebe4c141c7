from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.order_chat.models import OrderMessage
from apps.orders.tests.factories import OrderFactory, OrderMessageFactory, UserFactory


class OrderMessagesTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.order = OrderFactory()
        self.buyer = self.order.client
        self.freelancer = self.order.freelancer
        self.outsider = UserFactory()
        self.url = reverse("order_messages", args=[self.order.id])

    def test_client_message_is_addressed_to_freelancer(self):
        self.client.force_authenticate(user=self.buyer)
        response = self.client.post(self.url, {"content": "  Can you add a dark variant?  "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        message = OrderMessage.objects.get()
        self.assertEqual(message.sender, self.buyer)
        self.assertEqual(message.receiver, self.freelancer)
        self.assertEqual(message.content, "Can you add a dark variant?")
        self.assertEqual(response.data["data"]["receiver"]["id"], self.freelancer.id)

    def test_freelancer_message_is_addressed_to_client(self):
        self.client.force_authenticate(user=self.freelancer)
        self.client.post(self.url, {"content": "Sure, sending it tomorrow"}, format="json")

        self.assertEqual(OrderMessage.objects.get().receiver, self.buyer)

    def test_blank_content_is_rejected(self):
        self.client.force_authenticate(user=self.buyer)
        response = self.client.post(self.url, {"content": "   "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Content is required", response.data["message"])
        self.assertEqual(OrderMessage.objects.count(), 0)

    def test_outsider_cannot_read_or_write(self):
        self.client.force_authenticate(user=self.outsider)

        post = self.client.post(self.url, {"content": "hello"}, format="json")
        get = self.client.get(self.url)

        self.assertEqual(post.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(post.data["message"], "Not authorized to chat in this order")
        self.assertEqual(get.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_order_is_not_found(self):
        self.client.force_authenticate(user=self.buyer)
        response = self.client.get(reverse("order_messages", args=[999999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_messages_are_listed_oldest_first(self):
        first = OrderMessageFactory(order=self.order)
        second = OrderMessageFactory(order=self.order, sender=self.freelancer, receiver=self.buyer)
        OrderMessageFactory()
        self.client.force_authenticate(user=self.freelancer)

        response = self.client.get(self.url)

        self.assertEqual([message["id"] for message in response.data["data"]], [first.id, second.id])


class OrderMessagesReadTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.order = OrderFactory()
        self.url = reverse("order_messages_read", args=[self.order.id])

    def test_marks_only_messages_received_by_caller(self):
        received = OrderMessageFactory(order=self.order)
        sent = OrderMessageFactory(order=self.order, sender=self.order.freelancer, receiver=self.order.client)
        self.client.force_authenticate(user=self.order.freelancer)

        response = self.client.patch(self.url, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], {"updated": 1})
        received.refresh_from_db()
        sent.refresh_from_db()
        self.assertTrue(received.is_read)
        self.assertFalse(sent.is_read)

    def test_outsider_is_forbidden(self):
        OrderMessageFactory(order=self.order)
        self.client.force_authenticate(user=UserFactory())

        response = self.client.patch(self.url, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(OrderMessage.objects.get().is_read)


class OrderConversationsTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.quiet_order = OrderFactory(client=self.user)
        self.busy_order = OrderFactory(client=self.user)
        OrderFactory()

    def test_lists_orders_with_last_message_and_unread_count(self):
        OrderMessageFactory(
            order=self.busy_order, sender=self.busy_order.freelancer, receiver=self.user, is_read=True
        )
        OrderMessageFactory(order=self.busy_order, sender=self.busy_order.freelancer, receiver=self.user)
        latest = OrderMessageFactory(order=self.busy_order, sender=self.user, receiver=self.busy_order.freelancer)
        self.client.force_authenticate(user=self.user)

        response = self.client.get(reverse("order_conversations"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        conversations = {item["order"]["id"]: item for item in response.data["data"]}
        self.assertEqual(set(conversations), {self.quiet_order.id, self.busy_order.id})

        busy = conversations[self.busy_order.id]
        self.assertEqual(busy["last_message"]["id"], latest.id)
        self.assertEqual(busy["unread_count"], 1)

        quiet = conversations[self.quiet_order.id]
        self.assertIsNone(quiet["last_message"])
        self.assertEqual(quiet["unread_count"], 0)
