# core/constants.py
ORDER_STATUS_PENDING = 'pending'
ORDER_STATUS_IN_PROGRESS = 'in-progress'
ORDER_STATUS_COMPLETED = 'completed'
ORDER_STATUS_CANCELLED = 'cancelled'

ORDER_STATUS_CHOICES = (
    (ORDER_STATUS_PENDING, 'Pending'),          # Client placed the order, awaiting freelancer response
    (ORDER_STATUS_IN_PROGRESS, 'In Progress'),  # Freelancer accepted the order
    (ORDER_STATUS_COMPLETED, 'Completed'),      # Work delivered
    (ORDER_STATUS_CANCELLED, 'Cancelled'),      # Freelancer rejected or order was called off
)

ORDER_STATUSES = tuple(value for value, _ in ORDER_STATUS_CHOICES)

GIG_STATUS_CHOICES = (
    ('draft', 'Draft'),
    ('pending', 'Pending Review'),
    ('active', 'Active'),
    ('paused', 'Paused'),
    ('rejected', 'Rejected'),       # Admin only
)

GIG_ADMIN_ONLY_STATUSES = ('rejected',)

GIG_CATEGORY_CHOICES = (
    ('graphics-design', 'Graphics & Design'),
    ('digital-marketing', 'Digital Marketing'),
    ('writing-translation', 'Writing & Translation'),
    ('video-animation', 'Video & Animation'),
    ('music-audio', 'Music & Audio'),
    ('programming-tech', 'Programming & Tech'),
    ('business', 'Business'),
    ('lifestyle', 'Lifestyle'),
)

GIG_STATUS_ACTIVE = 'active'

GIG_MIN_PRICE = 5
GIG_MIN_DELIVERY_DAYS = 1

REVIEW_MIN_RATING = 1
REVIEW_MAX_RATING = 5
REVIEW_RATING_CHOICES = [(i, i) for i in range(REVIEW_MIN_RATING, REVIEW_MAX_RATING + 1)]  # 1 to 5 stars

NOTIFICATION_NEW_ORDER = 'new_order'
NOTIFICATION_ORDER_ACCEPTED = 'order_accepted'
NOTIFICATION_ORDER_REJECTED = 'order_rejected'
NOTIFICATION_ORDER_COMPLETED = 'order_completed'

NOTIFICATION_TYPE_CHOICES = (
    (NOTIFICATION_NEW_ORDER, 'New Order'),
    (NOTIFICATION_ORDER_ACCEPTED, 'Order Accepted'),
    (NOTIFICATION_ORDER_REJECTED, 'Order Rejected'),
    (NOTIFICATION_ORDER_COMPLETED, 'Order Completed'),
)

# E.164: leading +, 9 to 15 digits
PHONE_NUMBER_REGEX = r'^\+\d{9,15}$'
