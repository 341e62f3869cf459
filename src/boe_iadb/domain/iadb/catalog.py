from __future__ import annotations

from typing import Dict


class UnknownSeriesCodeError(KeyError):
    pass


# Catálogo estático: código IADB -> descrição.
# Fonte: https://www.bankofengland.co.uk/boeapps/database/index.asp?SectionRequired=I&first=yes&HideNums=-1&ExtraInfo=true&Travel=NIxIRx&levels=2
SERIES_CATALOG: Dict[str, str] = {
    "IUDSOIA": "Daily Sterling overnight index average (SONIA) rate",
    "XUDLCDS": "Spot exchange rate, Canadian Dollar into Sterling",
    "XUDLDKS": "Spot exchange rate, Danish Krone into Sterling",
    "XUDLERS": "Spot exchange rate, Euro into Sterling",
    "XUDLJYS": "Spot exchange rate, Japanese Yen into Sterling",
    "XUDLNKS": "Spot exchange rate, Norwegian Krone into Sterling",
    "XUDLSFS": "Spot exchange rate, Swiss Franc into Sterling",
    "XUDLSGS": "Spot exchange rate, Singapore Dollar into Sterling",
    "XUDLSKS": "Spot exchange rate, Swedish Krona into Sterling",
    "XUDLUSS": "Spot exchange rate, US $ into Sterling",
    "IUDBEDR": "Wholesale interest and discount rates, Official Bank Rate, Daily",
    "IUDAMIH": "Wholesale interest and discount rates, Average of UK banks' base rates, Daily",
    "XUDLDF1": "US dollar forward premium/discount rates, 1 month, Daily",
    "XUDLDF3": "US dollar forward premium/discount rates, 3 month, Daily",
    "XUDLDF6": "US dollar forward premium/discount rates, 6 month, Daily",
    "XUDLDFY": "US dollar forward premium/discount rates, 1 year, Daily",
    "XUDLDS1": "£ sterling against US dollar forward rates, 1 month, Daily",
    "XUDLDS3": "£ sterling against US dollar forward rates, 3 month, Daily",
    "XUDLDS6": "£ sterling against US dollar forward rates, 6 month, Daily",
    "XUDLDSY": "£ sterling against US dollar forward rates, 1 year, Daily",
    "XUDLGPS": "Gold price, against £ sterling, Daily",
    "XUDLGPD": "Gold price, against US dollar, Daily",
    "IUDSNPY": "Yields, British Government Securities (calculated using VRP model), Nominal par yields, 5 year, Daily",
    "IUDMNPY": "Yields, British Government Securities (calculated using VRP model), Nominal par yields, 10 year, Daily",
    "IUDLNPY": "Yields, British Government Securities (calculated using VRP model), Nominal par yields, 20 year, Daily",
    "IUDSIZC": "Yields, British Government Securities (calculated using VRP model), Zero coupon yields, Nominal, 5 year, Daily",
    "IUDMIZC": "Yields, British Government Securities (calculated using VRP model), Zero coupon yields, Nominal, 10 year, Daily",
    "IUDLIZC": "Yields, British Government Securities (calculated using VRP model), Zero coupon yields, Nominal, 20 year, Daily",
    "IUDSIIF": "Yields, British Government Securities (calculated using VRP model), Implied forward yields, Nominal, 5 year, Daily",
    "IUDMIIF": "Yields, British Government Securities (calculated using VRP model), Implied forward yields, Nominal, 10 year, Daily",
    "IUDLIIF": "Yields, British Government Securities (calculated using VRP model), Implied forward yields, Nominal, 20 year, Daily",
    "IUDWRLN": "Yields, British Government Securities (calculated using VRP model), Real gross redemption yields, 3.5% War Loan, Daily",
    "IUDAJUR": "Yields, British Government Securities (calculated using VRP model), Real gross redemption yields, 2% Index Linked Treasury Stock 2006, Daily",
    "IUDEBEN": "Yields, British Government Securities (calculated using VRP model), Real gross redemption yields, BoE Treasury Note 4.5% to 2004, Daily",
    "IUDAJLT": "Yields, British Government Securities (calculated using VRP model), Real gross redemption yields, 2.5% Index Linked Treasury Stock 2016, Daily",
    "IUDBK58": "Yields, British Government Securities (calculated using VRP model), Real gross redemption yields, 2.75% BoE Euro Note 2006, Daily",
    "IUDAJLW": "Yields, British Government Securities (calculated using VRP model), Real gross redemption yields, 10 year par gross redemption yield on British Government Securities, Daily",
    "IUMZICQ": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 2 year, 60% LTV, Monthly",
    "IUMBV34": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 2 year, 75% LTV, Combined bank and building society, Monthly",
    "IUMZICR": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 2 year, 85% LTV, Monthly",
    "IUMB482": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 2 year, 90% LTV, Combined bank and building society, Monthly",
    "IUM2WTL": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 2 year, 95% LTV, Combined bank and building society, Monthly",
    "IUMBV37": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 3 year, 75% LTV, Combined bank and building society, Monthly",
    "IUMZO27": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 5 year, 60% LTV, Monthly",
    "IUMBV42": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 5 year, 75% LTV, Combined bank and building society, Monthly",
    "IUMZO28": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 5 year, 90% LTV, Monthly",
    "IUM5WTL": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 5 year, 95% LTV, Combined bank and building society, Monthly",
    "IUMBV45": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, 10 year, 75% LTV, Combined bank and building society, Monthly",
    "IUMZO29": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, Buy-to-let 2 year, 60% LTV, Monthly",
    "IUMZID4": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, Buy-to-let 2 year, 75% LTV, Monthly",
    "IUMZO2A": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, Buy-to-let 5 year, 60% LTV, Monthly",
    "IUMZO2B": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed, Buy-to-let 5 year, 75% LTV, Monthly",
    "IUMBV48": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed term variable rate, 2 year, 75% LTV, Combined bank and building society, Monthly",
    "IUMB479": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed term variable rate, 2 year, 90% LTV, Combined bank and building society, Monthly",
    "IUM2WDT": "Quoted household interest rates, Secured lending (mortgage) rates, Fixed term variable rate, 2 year, 95% LTV, Combined bank and building society, Monthly",
    "IUMTLMV": "Quoted household interest rates, Secured lending (mortgage) rates, Revert-to-rate, Combined bank and building society, Monthly",
    "IUMBV24": "Quoted household interest rates, Secured lending (mortgage) rates, Lifetime Tracker, Combined bank and building society, Monthly",
    "IUMZO2C": "Quoted household interest rates, Unsecured lending rates, Personal loan, £3,000 Combined bank and building society, Monthly",
    "IUMBX67": "Quoted household interest rates, Unsecured lending rates, Personal loan, £5,000 Combined bank and building society, Monthly",
    "IUMHPTL": "Quoted household interest rates, Unsecured lending rates, Personal loan, £10,000 Combined bank and building society, Monthly",
    "IUMZO2D": "Quoted household interest rates, Unsecured lending rates, Personal loan, £25,000 Combined bank and building society, Monthly",
    "IUMCCTL": "Quoted household interest rates, Unsecured lending rates, Credit card, Combined bank and building society, Representative card, Monthly",
    "IUMZO2E": "Quoted household interest rates, Unsecured lending rates, Credit card, Combined bank and building society, 0% purchase period, Monthly",
    "IUMZO2F": "Quoted household interest rates, Unsecured lending rates, Credit card, Combined bank and building society, 0% balance transfer, Monthly",
    "IUMZO2G": "Quoted household interest rates, Unsecured lending rates, Credit card, Combined bank and building society, Lowest APR, Monthly",
    "IUMODTL": "Quoted household interest rates, Unsecured lending rates, Overdraft, Combined bank and building society, Monthly",
    "IUMB6VJ": "Quoted household interest rates, Deposit rates, Instant access savings, Including unconditional bonuses, Combined bank and building society, Monthly",
    "IUMB6VK": "Quoted household interest rates, Deposit rates, Instant access savings, Excluding unconditional bonuses, Combined bank and building society, Monthly",
    "IUMTHAK": "Quoted household interest rates, Deposit rates, Instant access savings, Branch-based (excluding bonuses), Combined bank and building society, Monthly",
    "IUMB6VL": "Quoted household interest rates, Deposit rates, Cash ISA, Variable rate, Including unconditional bonuses, Combined bank and building society, Monthly",
    "IUMB6VM": "Quoted household interest rates, Deposit rates, Cash ISA, Variable rate, Excluding unconditional bonuses, Combined bank and building society, Monthly",
    "IUMWTIS": "Quoted household interest rates, Deposit rates, Cash ISA, Variable rate, Branch-based excluding bonuses, Combined bank and building society, Monthly",
    "IUMB6VN": "Quoted household interest rates, Deposit rates, Cash ISA, Fixed rate 1 year, Combined bank and building society, Monthly",
    "IUMZID2": "Quoted household interest rates, Deposit rates, Cash ISA, Fixed rate 2 year, Monthly",
    "IUMWTFA": "Quoted household interest rates, Deposit rates, Fixed rate bonds, 1 year, Combined bank and building society, Monthly",
    "IUMB6RH": "Quoted household interest rates, Deposit rates, Fixed rate bonds, 2 year, Combined bank and building society, Monthly",
    "IUMB6RI": "Quoted household interest rates, Deposit rates, Fixed rate bonds, 3 year, Monthly",
    "IUMWTTA": "Quoted household interest rates, Deposit rates, Time (notice accounts), Combined bank and building society, Monthly",
    "CFMHSCP": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Public Sector, Interest bearing sight, Monthly",
    "CFMHSCQ": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Public Sector, Time, Monthly",
    "CFMBI22": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Central and Local Government, Interest bearing sight, Monthly",
    "CFMBI23": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Central and Local Government, Time, Monthly",
    "CFMBJ59": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Public Corporations, Interest bearing sight, Monthly",
    "CFMBJ62": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Public Corporations, Time, Monthly",
    "CFMBI28": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Banks (until December 2009), Interest bearing sight, Monthly",
    "CFMBI29": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Banks (until December 2009), Time, Monthly",
    "CFMHSDM": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Building Societies (until December 2009), Interest bearing sight, Monthly",
    "CFMHSDN": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Building Societies (until December 2009), Time, Monthly",
    "CFMB2HW": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Monetary financial institutions, Interest bearing sight, Monthly",
    "CFMB2HX": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Monetary financial institutions, Time, Monthly",
    "CFMHSCR": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Other Financial Corporations, Interest bearing sight, Monthly",
    "CFMHSCS": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Other Financial Corporations, Time, Monthly",
    "CFMHSCT": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Private Non-Financial Corporations, Interest bearing sight, Monthly",
    "CFMBI35": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Private Non-Financial Corporations, Time, Redeemable at notice, Monthly",
    "CFMHSCU": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Private Non-Financial Corporations, Time, Total, Monthly",
    "CFMHSCV": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Households, Interest bearing sight, Monthly",
    "CFMBJ65": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Households, Time, Redeemable at notice, Monthly",
    "CFMHSCW": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Households, Time, Total, Monthly",
    "CFMHSCX": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Non-Profit Institutions, Interest bearing sight, Monthly",
    "CFMBJ67": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Non-Profit Institutions, Time, Redeemable at notic, Monthly",
    "CFMHSCY": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Non-Profit Institutions, Time, Total, Monthly",
    "CFMZ6IW": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Time, Total, Monthly",
    "CFMZ6IQ": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Interest bearing sight, Total, Monthly",
    "CFMZ6IU": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Interest bearing sight, Total of which current accounts, Monthly",
    "CFMZ6LL": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Interest bearing sight, Monthly",
    "CFMZ6K4": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Time, Redeemable at notice, Monthly",
    "CFMZ6LK": "Effective Interest Rates, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Time, Total, Monthly",
    "CFMBJ69": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Public Corporations, Monthly",
    "CFMBJ72": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Private Non-Financial Corporations, Fixed maturity, Total, Monthly",
    "CFMBJ74": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Households Fixed maturity, Total, Monthly",
    "CFMBX2N": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Households Fixed maturity, Total of which fixed rate bonds, Monthly",
    "CFMBI87": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Non-profit institutions, Monthly",
    "CFMZ6IH": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Time, Fixed maturity, Total, Monthly",
    "CFMZ6JE": "Effective Interest Rates, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Time, Fixed maturity, Total, Monthly",
    "CFMHSCZ": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Public Sector, Monthly",
    "CFMBI49": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Central & Local Government, Monthly",
    "CFMBJ75": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Public Corporations, Loans, Monthly",
    "CFMBI52": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Public Corporations, Overdrafts, Monthly",
    "CFMBI57": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Banks (until December 2009), Monthly",
    "CFMHSDO": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Building Societies (until December 2009), Monthly",
    "CFMB2HY": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Monetary financial institutions, Monthly",
    "CFMHSDA": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Other Financial Corporations, Monthly",
    "CFMBI58": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Private non-Financial Corporations, Loans, Floating rate, Monthly",
    "CFMHSDC": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Private non-Financial Corporations, Loans, Fixed rate, Total, Monthly",
    "CFMHSDB": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Private non-Financial Corporations, Overdrafts, Monthly",
    "CFMBI69": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Personal Loans, Floating rate, Monthly",
    "CFMHSDI": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Personal Loans, Fixed Rate, Total, Monthly",
    "CFMHSDG": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Credit Cards, Interest bearing balances, Monthly",
    "CFMHSDP": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Credit Cards, All balances, Monthly",
    "CFMHSDH": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Credit Cards, Overdrafts, Monthly",
    "CFMBI64": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Secured on dwellings, Floating rate, Monthly",
    "CFMBX2D": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Secured on dwellings, Floating rate of which SVR, Monthly",
    "CFMBX2E": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Secured on dwellings, Floating rate of which lifetime tracker, Monthly",
    "CFMHSDE": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Secured on dwellings, Fixed Rate, Total, Monthly",
    "CFMHSDD": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Bridging Loans, Monthly",
    "CFMHSDK": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Non-Profit Institutions, Loans, Monthly",
    "CFMHSDJ": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Non-Profit Institutions, Overdraft, Monthly",
    "CFMZ6IR": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Credit cards, Interest bearing balances, Total, Monthly",
    "CFMZ6IS": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Credit cards, All balances, Total, Monthly",
    "CFMZ6K8": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Secured on dwellings, Floating rate, Total, Monthly",
    "CFMZ6KA": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Secured on dwellings, Fixed rate, Total, Monthly",
    "CFMZ6K6": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Secured on dwellings, Total, Monthly",
    "CFMZJ4A": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Overdrafts, Interest charging, Monthly",
    "CFMZ6KM": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Overdrafts, Interest and fee charging, Monthly",
    "CFMZ6KQ": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Other loans, Floating-rate, Monthly",
    "CFMZ6LI": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Other loans, Fixed-rate, Monthly",
    "CFMZ6KO": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Individuals and individual trusts, Other loans, Total, Monthly",
    "CFMZ6KX": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Overdrafts, Monthly",
    "CFMZ6L3": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Secured loans, Floating-rate, Monthly",
    "CFMZ6L5": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Secured loans, Fixed-rate, Monthly",
    "CFMZ6KZ": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Secured loans, Total, Monthly",
    "CFMZ6LU": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Other loans, Floating-rate, Monthly",
    "CFMZ6LE": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Other loans, Fixed-rate, Monthly",
    "CFMZ6LT": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Unincorporated Businesses, Other loans, Total, Monthly",
    "CFMZ6LR": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Small and medium sized PNFCs, Other loans, Floating-rate, Bank Rate linked, Total, Monthly",
    "CFMZ6HU": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Small and medium sized PNFCs, Other loans, Floating-rate, SONIA linked, Total, Monthly",
    "CFMZ6LQ": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Small and medium sized PNFCs, Other loans, Floating-rate, Total, Monthly",
    "CFMZ6I6": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Small and medium sized PNFCs, Other loans, Fixed-rate, Total, Monthly",
    "CFMZ6LN": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Small and medium sized PNFCs, Other loans, Total, Monthly",
    "CFMZ6IF": "Effective Interest Rates, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Small and medium sized PNFCs, Overdrafts, Monthly",
    "CFMBJ79": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Public Corporations, Monthly",
    "CFMBJ83": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Private Non-financial Corporations, Loans by rate type, Floating rate, Monthly",
    "CFMBJ84": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Private Non-financial Corporations, Loans by rate type, Fixed rate, Total, Monthly",
    "CFMBJ82": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Private Non-financial Corporations, Loans by original size, Total, Monthly",
    "CFMBJ47": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Personal Loans, Floating Rate, Monthly",
    "CFMBJ94": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Personal Loans, Fixed Rate, Total, Monthly",
    "CFMBJ93": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Personal Loans, Total, Monthly",
    "CFMBJ39": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Secured on Dwellings, Floating Rate, Monthly",
    "CFMBJ96": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Secured on Dwellings, Fixed Rate, Total, Monthly",
    "CFMBJ95": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Secured on Dwellings, Total, Monthly",
    "CFMBJ38": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Bridging Loans, Monthly",
    "CFMBJ97": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Non-Profit Institutions, Monthly",
    "CFMZ6JV": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Secured on dwellings, Fixed Rate, Total, Monthly",
    "CFMZ6JO": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Secured on dwellings, Floating Rate, Total, Monthly",
    "CFMZ6JT": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Secured on dwellings, Floating Rate of which lifetime tracker, Monthly",
    "CFMZ6JM": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Secured on dwellings, Total, Monthly",
    "CFMZ6K7": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Other loans, Floating-rate, Monthly",
    "CFMZ6K9": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Other loans, Fixed-rate, Monthly",
    "CFMZ6K5": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Individuals and individual trusts, Other loans, Total, Monthly",
    "CFMZJ3M": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Small and medium sized PNFCs, Other loans, Floating-rate, Bank Rate linked, Total, Monthly",
    "CFMZJ3Q": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Small and medium sized PNFCs, Other loans, Floating-rate, SONIA linked, Total, Monthly",
    "CFMZJ3L": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Small and medium sized PNFCs, Other loans, Floating-rate, Total, Monthly",
    "CFMZJ3U": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Small and medium sized PNFCs, Other loans, Fixed-rate, Total, Monthly",
    "CFMZ6LD": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Small and medium sized PNFCs, Other loans, Total, Monthly",
    "CFMZ6KJ": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Secured loans, Floating-rate, Monthly",
    "CFMZ6KL": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Secured loans, Fixed-rate, Total, Monthly",
    "CFMZ6KH": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Secured loans, Total, Monthly",
    "CFMZ6KY": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Other loans, Floating-rate, Monthly",
    "CFMZ6L2": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Other loans, Fixed-rate, Total, Monthly",
    "CFMZ6KW": "Effective Interest Rates, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Unincorporated Businesses, Other loans, Total, Monthly",
    "CFQBK2B": "Effective Interest Rates, Distribution of Balances, Outstanding sterling time deposits with UK monetary financial institutions (excl. Central bank), Private Non-Financial Corporations, Redeemable at notice, Quarterly",
    "CFQB9KZ": "Effective Interest Rates, Distribution of Balances, Outstanding sterling time deposits with UK monetary financial institutions (excl. Central bank), Private Non-Financial Corporations, Fixed maturity, Total fixed, Quarterly",
    "CFQB9KV": "Effective Interest Rates, Distribution of Balances, Outstanding sterling time deposits with UK monetary financial institutions (excl. Central bank), Households, Redeemable at notice, Quarterly",
    "CFQB9KU": "Effective Interest Rates, Distribution of Balances, Outstanding sterling time deposits with UK monetary financial institutions (excl. Central bank), Households, Fixed maturity, Total fixed, Quarterly",
    "CFQZJ3Y": "Effective Interest Rates, Distribution of Balances, Outstanding sterling time deposits with UK monetary financial institutions (excl. Central bank), Individuals and individual trusts, Redeemable at notice, Quarterly",
    "CFQZJ3Z": "Effective Interest Rates, Distribution of Balances, Outstanding sterling time deposits with UK monetary financial institutions (excl. Central bank), Individuals and individual trusts, Fixed maturity, Total fixed, Quarterly",
    "CFQB3OZ": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Private Non-Financial Corporations, Loans, Floating rate, Quarterly",
    "CFQB3RY": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Private Non-Financial Corporations, Loans, Fixed rate, Total fixed, Quarterly",
    "CFQB3RU": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Households, Unsecured loans, Floating rate, Quarterly",
    "CFQB3RT": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Households, Unsecured loans, Fixed rate, Total fixed, Quarterly",
    "CFQBK2N": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Households, Secured on dwellings, Floating rate, Quarterly",
    "CFQBK2M": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Households, Secured on dwellings, Fixed rate, Total fixed, Quarterly",
    "CFQZJ48": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Individuals and individual trusts, Secured on dwellings, Floating rate, Quarterly",
    "CFQZJ49": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Individuals and individual trusts, Secured on dwellings, Fixed rate, Total fixed, Quarterly",
    "CFQZJ4E": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Individuals and individual trusts, Other loans, Floating rate, Quarterly",
    "CFQZJ4F": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), Individuals and individual trusts, Other loans, Fixed rate, Total fixed, Quarterly",
    "CFQZJ4J": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), SMEs, Floating rate, Quarterly",
    "CFQZJ4K": "Effective Interest Rates, Distribution of Balances, Outstanding sterling loans by UK monetary financial institutions (excl. Central bank), SMEs, Fixed rate, Total fixed, Quarterly",
    "CFQB4VP": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Private Non-Financial Corporations, Loans, Floating rate, Quarterly",
    "CFQB4VO": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Private Non-Financial Corporations, Loans, Fixed rate, Total fixed, Quarterly",
    "CFQB4VK": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Households, Unsecured loans, Floating rate, Quarterly",
    "CFQB4VJ": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Households, Unsecured loans, Fixed rate, Total fixed, Quarterly",
    "CFQB4VF": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Households, Secured on dwellings, Floating rate, Quarterly",
    "CFQB4VE": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Households, Secured on dwellings, Fixed rate, Total fixed, Quarterly",
    "CFQZJ4U": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Individuals and individual trusts, Secured on dwellings, Floating rate, Quarterly",
    "CFQZJ4V": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Individuals and individual trusts, Secured on dwellings, Fixed rate, Total fixed, Quarterly",
    "CFQZJ54": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Individuals and individual trusts, Other loans, Floating rate, Quarterly",
    "CFQZJ55": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, Individuals and individual trusts, Other loans, Fixed rate, Total fixed, Quarterly",
    "CFQZJ59": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, SMEs, Floating rate, Quarterly",
    "CFQZJ5A": "Effective Interest Rates, Distribution of Balances, New sterling loans by UK monetary financial institutions (excl. Central bank) in the month, SMEs, Fixed rate, Total fixed, Quarterly",
    "CFMB2CT": "Effective Interest Rates, Additional series published by the ECB, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Households, Time, Redeemable at notice, up to 3 months, Monthly",
    "CFMB2CU": "Effective Interest Rates, Additional series published by the ECB, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Households, Time, Redeemable at notice, over 3 months, Monthly",
    "CFMB2CP": "Effective Interest Rates, Additional series published by the ECB, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Households, Time, Fixed Maturity, up to 2 years, Monthly",
    "CFMB2CQ": "Effective Interest Rates, Additional series published by the ECB, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Private Non-Financial Corporations, Time, Fixed Maturity, up to 2 years, Monthly",
    "CFMB2CR": "Effective Interest Rates, Additional series published by the ECB, Outstanding sterling deposits with UK monetary financial institutions (excl. central bank), Private Non-Financial Corporations, Time, Fixed Maturity, over 2 years, Monthly",
    "CFMB2CV": "Effective Interest Rates, Additional series published by the ECB, New business rates for sterling fixed rate, fixed maturity time deposits placed with UK monetary financial institutions (excl. central bank) in the month, Private Non-Financial Corporations, Time, Fixed Maturity, over 1 year up to 2 years, Monthly",
    "CFMB2CS": "Effective Interest Rates, Additional series published by the ECB, Outstanding sterling loans by UK monetary financial institutions (excl. central bank), Households, Secured on dwellings, Fixed Maturity, over 5 years, Monthly",
    "CFMB2CW": "Effective Interest Rates, Additional series published by the ECB, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Personal Loans, Floating and Fixed Rate, up to 1 year, Monthly",
    "CFMB2CX": "Effective Interest Rates, Additional series published by the ECB, New business rates for sterling lending undertaken by UK monetary financial institutions (excl. central bank) in the month, Households, Secured on Dwellings, Floating and Fixed Rate, up to 1 year, Monthl",
}


def is_known_code(code: str) -> bool:
    return code.strip().upper() in SERIES_CATALOG


def canonical_code(code: str) -> str:
    """Forma canônica do código (sem espaços, maiúsculo). Levanta se não estiver no catálogo."""
    c = code.strip().upper()
    if c not in SERIES_CATALOG:
        raise UnknownSeriesCodeError(f"Unknown IADB series code: {code!r}")
    return c


def describe(code: str) -> str:
    return SERIES_CATALOG[canonical_code(code)]
