"""Shared statement samples for parser tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


# Text extracted from a EUR balance statement (spaced layout)
EUR_STATEMENT = """Wise Europe SA
Rue du Trône 100, 3rd floor
Brussels
1050
Belgium
EUR statement
1 November 2025 [GMT] - 30 November 2025 [GMT]
Generated on: 11 December 2025
Account Holder
EphyrTech OÜ
Masina tn 22
Kesklinna district, Tallinn city, Harju county
10113
Estonia
IBAN
BE61 9051 1531 4617
Swift/BIC
TRWIBEB1XXX
EUR on 30 November 2025 [GMT] 697.15 EUR
Description Incoming Outgoing Amount
Card transaction of 29.43 USD issued by Backblaze Inc BACKBLAZE.COM
27 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3166196743
-25.51 697.15
Card transaction of 88.49 EUR issued by Claude.ai Subscription ANTHROPIC.
COM
26 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3162375092
-88.49 722.66
Card transaction of 21.78 EUR issued by Claude.ai Subscription ANTHROPIC.
COM
24 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3155855301
-21.78 811.15
Sent money to Bohdan-Volodymyr Lesiv
21 November 2025 Transaction: TRANSFER-1831544314 Reference: Payment by contract myde5nq
-1,000.00 832.93
Sent money to BUSINESS PROFESSIONAL CONSULTATIONS OÜ
10 November 2025 Transaction: TRANSFER-1813429851 Reference: Arve nr. 300
-300.00 1,832.93
Card transaction of 617.79 EUR issued by Europcar Madrid
10 November 2025 Card ending in 7537 Bohdan-Volodymyr Lesiv Transaction: CARD-3076954634
100.00 2,132.93
Card transaction of 68.00 EUR issued by Booking.com AMSTERDAM
6 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3091785824
-68.00 2,032.93
Cashback
6 November 2025 Transaction: BALANCE_CASHBACK-694c8a28-22ae-4410-eba1-ade3459fcceb
0.59 2,100.93
Sent money to Bohdan-Volodymyr Lesiv
4 November 2025 Transaction: TRANSFER-1804222834 Reference: Payment by contract myde5nq
-5,000.00 2,100.34
Card transaction of 136.90 EUR issued by Hetzner Online Gmbh
Gunzenhausen
4 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3082119403
-136.90 7,100.34
Card transaction of -250.09 EUR issued by Europcar Spain Madrid
4 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3082003520
250.09 7,237.24
Received money from NIUM * Ciba Health Inc with reference RT3772376495
3 November 2025 Transaction: TRANSFER-1801587256 Reference: RT3772376495
6,788.00 6,987.15
Card transaction of 617.79 EUR issued by Europcar Madrid
2 November 2025 Card ending in 7537 Bohdan-Volodymyr Lesiv Transaction: CARD-3076954634
-717.79 199.15
Received money from Bohdan-Volodymyr Lesiv with reference 727763
2 November 2025 Transaction: TRANSFER-1799705561 Reference: 727763
400.00 916.94
Card transaction of 32.40 EUR issued by Google Gsuite_ephyrtech.c Dublin
1 November 2025 Card ending in 9924 Bohdan-Volodymyr Lesiv Transaction: CARD-3072509862
-32.40 516.94
Wise is the trading name of Wise Europe SA, a Payment Institution authorised by the National Bank of Belgium, incorporated in Belgium with
registered number 0713629988 and registered office at Rue Du Trône 100, 3rd floor, 1050, Brussels, Belgium.
Need help? Visit wise.com/help"""


# Text extracted from a USD balance statement (run-on layout, no separators)
USD_STATEMENT = """Wise Europe SA
Rue du Trône 100, 3rd floor
Brussels
1050
Belgium
USD statement
1 January 2026 [GMT] - 31 January 2026 [GMT]
Generated on: 11 February 2026
Account Holder
EphyrTech OÜ
Masina tn 22
Kesklinna district, Tallinn city, Harju county
10113
Estonia
Account number
563252420989629
Routing number
084009519
Swift/BIC
TRWIUS35XXX
USD on 31 January 2026 [GMT]1,925.99 USD
DescriptionIncomingOutgoingAmount
Card transaction of 32.00 USD issued by Backblaze Inc BACKBLAZE.COM
27 January 2026Card ending in 9924Bohdan-Volodymyr LesivTransaction: CARD-3390446938
-32.001,925.99
Card transaction of 108.90 EUR issued by Claude.ai Subscription ANTHROPIC.
COM
26 January 2026Card ending in 9924Bohdan-Volodymyr LesivTransaction: CARD-3386929651
-7.211,957.99
Card transaction of 300.00 GBP issued by Avis Budget London
20 January 2026Card ending in 7537Bohdan-Volodymyr LesivTransaction: CARD-3358217165
402.261,965.20
Card transaction of 300.00 GBP issued by Avis Budget London
18 January 2026Card ending in 7537Bohdan-Volodymyr LesivTransaction: CARD-3358217165
-402.261,562.94
Sent money to Bohdan-Volodymyr Lesiv
12 January 2026Transaction: TRANSFER-1916123887Reference: Payment by contract myde5nq
-6,000.001,965.20
Card transaction of 24.80 USD issued by Figma FIGMA.COM
10 January 2026Card ending in 9924Bohdan-Volodymyr LesivTransaction: CARD-3331259541
-24.807,965.20
Card transaction of 10.00 USD issued by Aqua Voice AQUAVOICE.COM
9 January 2026Card ending in 7537Bohdan-Volodymyr LesivTransaction: CARD-3328110221
-10.007,990.00
Received money from GUSTO with reference 021000028330932
6 January 2026Transaction: TRANSFER-1907329445Reference: 021000028330932
8,000.008,000.00
Wise is the trading name of Wise Europe SA, a Payment Institution authorised by the National Bank of Belgium, incorporated in Belgium with
registered number 0713629988 and registered office at Rue Du Trône 100, 3rd floor, 1050, Brussels, Belgium.
Need help? Visit wise.com/help"""


EMPTY_TABLE_STATEMENT = """EUR statement
1 November 2025 [GMT] - 30 November 2025 [GMT]
Description Incoming Outgoing Amount
Wise is the trading name of Wise Europe SA."""


@pytest.fixture
def eur_text():
    return EUR_STATEMENT


@pytest.fixture
def usd_text():
    return USD_STATEMENT


@pytest.fixture
def empty_table_text():
    return EMPTY_TABLE_STATEMENT
