# This file defines tooltip text for each metric card and chart.
# It exists so operators can read the funnel numbers without knowing the underlying tables.
# A single dictionary keeps explanations consistent between the page and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "total_chat_card": "Chats started in the selected time frame, counted from PSID inputs.",
    "total_lead_card": "Conversations tagged with the Lead intent.",
    "total_buy_card": "Conversations tagged with the Purchase intent.",
    "total_buy_value_card": "Sum of all recorded purchase values in Thai baht.",
    "chat_to_lead_card": "Share of chats that became leads, rounded to a whole percent.",
    "lead_to_buy_card": "Share of leads that went on to purchase, rounded to a whole percent.",
    "chat_to_buy_card": "Share of chats that ended in a purchase, rounded to a whole percent.",
    "total_good_customer_card": "Lead + Purchase + ViewContent + AddToCart + InitiateCheckout.",
    "total_view_content_card": "Conversations tagged ViewContent (VC).",
    "total_add_to_cart_card": "Conversations tagged AddToCart (ATC).",
    "total_initiate_checkout_card": "Conversations tagged InitiateCheckout (IC).",
    "total_bad_customer_card": "Spam + Blocking + Ban.",
    "total_spam_card": "Conversations moved to spam.",
    "total_blocking_card": "Conversations where the customer blocked the page.",
    "total_ban_card": "Customers banned from the page.",
    "performance_overview_chart": "Chat, lead, and buy volume per period for the selected time frame.",
    "conversion_chart": "Lead-to-buy conversion rate (left axis) against buy value in baht (right axis).",
}
