import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from errors import NoOrdersError


def summarize(orders):
    """Aggregate the order history.

    Returns a dict with:
    - ``revenue_by_product``: product name -> revenue
    - ``qty_by_product``: product name -> quantity sold
    - ``revenue_by_method``: payment method -> revenue
    - ``order_count`` and ``total_revenue``
    """
    revenue_by_product = {}
    qty_by_product = {}
    revenue_by_method = {}
    for order in orders:
        for item in order.items:
            name = item.product.name
            revenue_by_product[name] = revenue_by_product.get(name, 0.0) + item.total
            qty_by_product[name] = qty_by_product.get(name, 0) + item.qty
        method = order.payment_method
        revenue_by_method[method] = revenue_by_method.get(method, 0.0) + order.total
    return {
        "revenue_by_product": revenue_by_product,
        "qty_by_product": qty_by_product,
        "revenue_by_method": revenue_by_method,
        "order_count": len(orders),
        "total_revenue": sum(o.total for o in orders),
    }


def render_sales_report(orders, path, top=10):
    """Save a PNG with top items (by quantity) and revenue share per payment method."""
    if not orders:
        raise NoOrdersError()
    summary = summarize(orders)

    fig = plt.Figure(figsize=(10, 4))

    # Top items by quantity sold
    ranked = sorted(summary["qty_by_product"].items(), key=lambda kv: kv[1], reverse=True)[:top]
    names = [name for name, _ in ranked]
    qtys = [qty for _, qty in ranked]
    ax1 = fig.add_subplot(121)
    if names:
        ax1.barh(list(reversed(names)), list(reversed(qtys)), color="#2ca02c")
        ax1.set_title("Top Items (by quantity)")
        ax1.set_xlabel("Quantity Sold")
    else:
        ax1.text(0.5, 0.5, "No items sold", ha="center", va="center")

    # Revenue contribution per payment method
    methods = list(summary["revenue_by_method"].keys())
    amounts = [summary["revenue_by_method"][m] for m in methods]
    ax2 = fig.add_subplot(122)
    if sum(amounts) > 0:
        ax2.pie(amounts, labels=methods, autopct="%1.1f%%", startangle=90)
        ax2.set_title(f"Revenue by Payment (${summary['total_revenue']:,.2f})")
    else:
        ax2.text(0.5, 0.5, "No revenue", ha="center", va="center")

    fig.subplots_adjust(wspace=0.45)
    fig.savefig(path, bbox_inches="tight")
    return str(path)
