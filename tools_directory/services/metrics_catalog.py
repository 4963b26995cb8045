"""Analytics metrics reference catalogue.

Static list of the events emitted by the tracking SDK, grouped by category.
"""

from collections import Counter

from ..models.enums import MetricCategory
from ..models.metrics import CategoryInfo, Metric, MetricsCatalogResponse

CATEGORY_LABELS: dict[MetricCategory, str] = {
    MetricCategory.SESSION: "Session",
    MetricCategory.NAVIGATION: "Navigation",
    MetricCategory.ECOMMERCE: "E-commerce",
    MetricCategory.AUTHENTICATION: "Authentication",
    MetricCategory.STORE: "Store",
    MetricCategory.LOCATION: "Location",
    MetricCategory.MENU: "Menu",
    MetricCategory.SEARCH: "Search",
    MetricCategory.LOYALTY: "Loyalty & Promos",
    MetricCategory.ERROR: "Error",
    MetricCategory.EXPERIMENT: "Experiments",
}

METRICS: list[Metric] = [
    # Session Events
    Metric(
        name="session_start",
        method="init()",
        category=MetricCategory.SESSION,
        description="Automatically tracked when SDK initializes. Captures landing page and referrer.",
    ),
    Metric(
        name="session_end",
        method="automatic",
        category=MetricCategory.SESSION,
        description="Automatically tracked on page unload. Includes total session duration.",
    ),
    Metric(
        name="page_hidden",
        method="automatic",
        category=MetricCategory.SESSION,
        description="Tracked when page visibility changes to hidden. Includes time spent on page.",
    ),
    Metric(
        name="page_visible",
        method="automatic",
        category=MetricCategory.SESSION,
        description="Tracked when page becomes visible again after being hidden.",
    ),

    # Navigation Events
    Metric(
        name="page_view",
        method="pageView(options)",
        category=MetricCategory.NAVIGATION,
        description="Track page views with optional page type. Menu pages are tagged as funnel step 1.",
        parameters="pageType?: string",
    ),
    Metric(
        name="scroll_depth",
        method="automatic",
        category=MetricCategory.NAVIGATION,
        description="Automatically tracked at 25%, 50%, 75%, and 100% scroll milestones.",
    ),
    Metric(
        name="click",
        method="data-veya-track attribute",
        category=MetricCategory.NAVIGATION,
        description="Tracks clicks on elements with data-veya-track attribute. Use data-veya-props for custom properties.",
    ),

    # E-commerce Events
    Metric(
        name="product_view",
        method="productView(product)",
        category=MetricCategory.ECOMMERCE,
        description="Track when a user views a product detail page.",
        parameters="id, name, category, price",
    ),
    Metric(
        name="product_click",
        method="productClick(product)",
        category=MetricCategory.ECOMMERCE,
        description="Track when a user clicks on a product (e.g., from a list).",
        parameters="id, name, category, price",
    ),
    Metric(
        name="add_to_cart",
        method="addToCart(product, quantity)",
        category=MetricCategory.ECOMMERCE,
        description="Track item added to cart. Updates internal cart state. Tagged as funnel step 2.",
        parameters="id, name, category, price, quantity",
    ),
    Metric(
        name="remove_from_cart",
        method="removeFromCart(product, quantity)",
        category=MetricCategory.ECOMMERCE,
        description="Track item removed from cart. Updates internal cart state.",
        parameters="id, name, price, quantity",
    ),
    Metric(
        name="update_cart_quantity",
        method="updateCartQuantity(product, oldQty, newQty)",
        category=MetricCategory.ECOMMERCE,
        description="Track quantity changes for cart items.",
        parameters="id, name, oldQuantity, newQuantity",
    ),
    Metric(
        name="cart_view",
        method="viewCart()",
        category=MetricCategory.ECOMMERCE,
        description="Track when user views their cart. Includes cart value and item count.",
    ),
    Metric(
        name="checkout_start",
        method="checkoutStart()",
        category=MetricCategory.ECOMMERCE,
        description="Track checkout initiation. Tagged as funnel step 3 (checkout_info).",
    ),
    Metric(
        name="checkout_step",
        method="checkoutStep(step)",
        category=MetricCategory.ECOMMERCE,
        description="Track progression through checkout steps.",
        parameters="step: string",
    ),
    Metric(
        name="add_payment_info",
        method="addPaymentInfo(paymentMethod)",
        category=MetricCategory.ECOMMERCE,
        description="Track payment method selection. Tagged as funnel step 4.",
        parameters="paymentMethod: string",
    ),
    Metric(
        name="purchase",
        method="checkoutComplete(order)",
        category=MetricCategory.ECOMMERCE,
        description="Track completed purchase. Tagged as funnel step 5 (confirmation). Clears cart.",
        parameters="id, olo_order_id, total, subtotal, tax, tip, orderType, paymentMethod, items",
    ),
    Metric(
        name="quick_add_attempted",
        method="quickAddAttempted(options)",
        category=MetricCategory.ECOMMERCE,
        description="Track when user taps quick add button before API call.",
        parameters="productId, productName, source, modifierCount",
    ),
    Metric(
        name="quick_add_failed",
        method="quickAddFailed(options)",
        category=MetricCategory.ECOMMERCE,
        description="Track when quick add API call fails.",
        parameters="productId, errorType, errorMessage, source",
    ),

    # Authentication Events
    Metric(
        name="login_attempt",
        method="loginAttempt(method)",
        category=MetricCategory.AUTHENTICATION,
        description="Track login attempt with method (email, social, etc.).",
        parameters="method: string",
    ),
    Metric(
        name="login_success",
        method="loginSuccess(method, customerId)",
        category=MetricCategory.AUTHENTICATION,
        description="Track successful login. Sets customer ID for future events.",
        parameters="method: string, customerId: string",
    ),
    Metric(
        name="login_failure",
        method="loginFailure(method, error)",
        category=MetricCategory.AUTHENTICATION,
        description="Track failed login attempt with error message.",
        parameters="method: string, error: string",
    ),
    Metric(
        name="logout",
        method="logout()",
        category=MetricCategory.AUTHENTICATION,
        description="Track user logout. Clears customer ID.",
    ),
    Metric(
        name="identify",
        method="identify(customerId, traits)",
        category=MetricCategory.AUTHENTICATION,
        description="Associate visitor with customer ID and optional traits.",
        parameters="customerId: string, traits?: object",
    ),

    # Store Events
    Metric(
        name="store_selected",
        method="setStore(store)",
        category=MetricCategory.STORE,
        description="Track initial store selection. Sets store context for all future events.",
        parameters="id, name, orderType, address?",
    ),
    Metric(
        name="store_changed",
        method="setStore(store)",
        category=MetricCategory.STORE,
        description="Track when user changes to a different store. Includes previous store info.",
        parameters="id, name, orderType, address?",
    ),
    Metric(
        name="order_type_changed",
        method="setOrderType(orderType)",
        category=MetricCategory.STORE,
        description="Track when user switches between pickup and delivery.",
        parameters="orderType: 'pickup' | 'delivery'",
    ),

    # Location Selection Events
    Metric(
        name="location_modal_opened",
        method="locationModalOpened(options)",
        category=MetricCategory.LOCATION,
        description="Track when location selection modal opens.",
        parameters="trigger?, hasRecentLocations?",
    ),
    Metric(
        name="fulfillment_method_selected",
        method="fulfillmentMethodSelected(options)",
        category=MetricCategory.LOCATION,
        description="Track when user selects fulfillment method (pickup/delivery).",
        parameters="method, previousMethod?",
    ),
    Metric(
        name="location_permission_requested",
        method="locationPermissionRequested()",
        category=MetricCategory.LOCATION,
        description="Track when location permission is requested from browser.",
    ),
    Metric(
        name="location_permission_granted",
        method="locationPermissionResponse(true)",
        category=MetricCategory.LOCATION,
        description="Track when user grants location permission.",
    ),
    Metric(
        name="location_permission_denied",
        method="locationPermissionResponse(false)",
        category=MetricCategory.LOCATION,
        description="Track when user denies location permission.",
    ),
    Metric(
        name="location_search_started",
        method="locationSearchStarted()",
        category=MetricCategory.LOCATION,
        description="Track when user starts typing in location search.",
    ),
    Metric(
        name="location_search_results",
        method="locationSearchResults(options)",
        category=MetricCategory.LOCATION,
        description="Track location search results returned.",
        parameters="query, resultCount, searchType?",
    ),
    Metric(
        name="location_selected",
        method="locationSelected(options)",
        category=MetricCategory.LOCATION,
        description="Track when user selects a location.",
        parameters="locationId, locationName, fulfillmentMethod, resultPosition?, selectionSource?, distance?",
    ),
    Metric(
        name="location_view_toggled",
        method="locationViewToggled(view)",
        category=MetricCategory.LOCATION,
        description="Track when user toggles between list and map view.",
        parameters="view: 'list' | 'map'",
    ),
    Metric(
        name="recent_location_used",
        method="recentLocationUsed(options)",
        category=MetricCategory.LOCATION,
        description="Track when returning customer uses a recent location.",
        parameters="locationId, locationName, position, lastOrderDate?",
    ),
    Metric(
        name="location_search_no_results",
        method="locationSearchNoResults(options)",
        category=MetricCategory.LOCATION,
        description="Track when location search returns no results.",
        parameters="query, searchType?",
    ),
    Metric(
        name="location_search_error",
        method="locationSearchError(options)",
        category=MetricCategory.LOCATION,
        description="Track location search error.",
        parameters="errorType, errorMessage?, query?",
    ),
    Metric(
        name="delivery_unavailable",
        method="deliveryUnavailable(options)",
        category=MetricCategory.LOCATION,
        description="Track when delivery is unavailable for an address.",
        parameters="address, reason?, nearestLocationId?, nearestDistance?",
    ),
    Metric(
        name="location_services_disabled",
        method="locationServicesDisabled()",
        category=MetricCategory.LOCATION,
        description="Track when user has location services disabled.",
    ),
    Metric(
        name="delivery_address_entered",
        method="deliveryAddressEntered(options)",
        category=MetricCategory.LOCATION,
        description="Track when user enters delivery address.",
        parameters="addressType?, hasApartment?",
    ),
    Metric(
        name="delivery_address_validated",
        method="deliveryAddressValidated(options)",
        category=MetricCategory.LOCATION,
        description="Track when delivery address is validated.",
        parameters="success, validationType?, errorReason?",
    ),
    Metric(
        name="delivery_details_completed",
        method="deliveryDetailsCompleted(options)",
        category=MetricCategory.LOCATION,
        description="Track when user completes delivery details form.",
        parameters="hasApartment, hasInstructions, deliveryOption?",
    ),
    Metric(
        name="delivery_fallback_to_pickup",
        method="deliveryFallbackToPickup(options)",
        category=MetricCategory.LOCATION,
        description="Track when user switches from delivery to pickup after delivery unavailable.",
        parameters="reason, selectedLocationId?, selectedLocationName?",
    ),

    # Menu Events
    Metric(
        name="menu_loaded",
        method="menuLoaded(options)",
        category=MetricCategory.MENU,
        description="Track menu load performance and content metrics.",
        parameters="loadTime, categoryCount, productCount, hasRecentItems, recentItemsCount",
    ),
    Metric(
        name="category_viewed",
        method="categoryViewed(category)",
        category=MetricCategory.MENU,
        description="Track when a category scrolls into viewport.",
        parameters="id, name, position, viewDuration?",
    ),
    Metric(
        name="category_clicked",
        method="categoryClicked(category)",
        category=MetricCategory.MENU,
        description="Track when user taps category tab to navigate.",
        parameters="id, name, position",
    ),
    Metric(
        name="menu_scroll",
        method="menuScroll(options)",
        category=MetricCategory.MENU,
        description="Track menu scroll depth milestones (25/50/75/100%).",
        parameters="scrollDepth, categoryInView, scrollDirection, scrollVelocity",
    ),
    Metric(
        name="category_scroll",
        method="categoryScroll(options)",
        category=MetricCategory.MENU,
        description="Track horizontal scrolling of category tabs.",
        parameters="scrollPosition, categoriesVisible, totalCategories, scrollDirection",
    ),
    Metric(
        name="product_impression",
        method="productImpression(options)",
        category=MetricCategory.MENU,
        description="Track when product is visible in viewport for >2 seconds.",
        parameters="productId, viewDuration, scrollPosition, categoryContext, hasQuickAdd",
    ),
    Metric(
        name="menu_session_summary",
        method="menuSessionSummary(options)",
        category=MetricCategory.MENU,
        description="Track overall menu browsing session when user leaves menu.",
        parameters="sessionDuration, categoriesVisited, productsViewed, searchUsed, quickAddsAttempted, recentItemsEngaged",
    ),
    Metric(
        name="conveyance_interaction",
        method="conveyanceInteraction(options)",
        category=MetricCategory.MENU,
        description="Track engagement with hero image conveyance.",
        parameters="conveyanceType, scrollDepth, imageEngagement",
    ),
    Metric(
        name="recent_items_loaded",
        method="recentItemsLoaded(options)",
        category=MetricCategory.MENU,
        description="Track when recent items section is populated from order history.",
        parameters="itemCount, oldestOrderDate, newestOrderDate",
    ),
    Metric(
        name="recent_items_empty",
        method="recentItemsEmpty()",
        category=MetricCategory.MENU,
        description="Track when authenticated user has no order history.",
    ),
    Metric(
        name="recent_item_viewed",
        method="recentItemViewed(item)",
        category=MetricCategory.MENU,
        description="Track when a recent item appears in viewport.",
        parameters="productId, lastOrderDate, hasQuickAdd",
    ),
    Metric(
        name="recent_item_clicked",
        method="recentItemClicked(item)",
        category=MetricCategory.MENU,
        description="Track when user taps on a recent item.",
        parameters="productId, lastOrderDate, position, action",
    ),
    Metric(
        name="recent_items_scroll",
        method="recentItemsScroll(options)",
        category=MetricCategory.MENU,
        description="Track horizontal scroll of recent items carousel.",
        parameters="itemsVisible, totalItems, scrollPosition",
    ),

    # Search Events
    Metric(
        name="search_started",
        method="searchStarted()",
        category=MetricCategory.SEARCH,
        description="Track when user activates search mode.",
    ),
    Metric(
        name="search",
        method="search(query, resultCount)",
        category=MetricCategory.SEARCH,
        description="Track search query and result count (legacy method).",
        parameters="query: string, resultCount: number",
    ),
    Metric(
        name="search_cleared",
        method="searchCleared(options)",
        category=MetricCategory.SEARCH,
        description="Track when user clears or cancels search.",
        parameters="query, hadResults, searchDuration",
    ),
    Metric(
        name="search_no_results",
        method="searchNoResults(options)",
        category=MetricCategory.SEARCH,
        description="Track when search returns no results.",
        parameters="query, queryLength",
    ),
    Metric(
        name="search_result_clicked",
        method="searchResultClicked(options)",
        category=MetricCategory.SEARCH,
        description="Track when user clicks a product from search results.",
        parameters="query, productId, resultPosition, categoryContext",
    ),

    # Loyalty Events
    Metric(
        name="promo_apply",
        method="promoApply(promo)",
        category=MetricCategory.LOYALTY,
        description="Track promo code application attempt.",
        parameters="code, success, discount, error",
    ),
    Metric(
        name="promo_remove",
        method="promoRemove(code)",
        category=MetricCategory.LOYALTY,
        description="Track promo code removal.",
        parameters="code: string",
    ),
    Metric(
        name="reward_view",
        method="rewardView(reward)",
        category=MetricCategory.LOYALTY,
        description="Track when user views available rewards.",
        parameters="reward: object",
    ),
    Metric(
        name="reward_apply",
        method="rewardApply(reward)",
        category=MetricCategory.LOYALTY,
        description="Track when user applies a reward.",
        parameters="reward: object",
    ),
    Metric(
        name="reward_remove",
        method="rewardRemove(reward)",
        category=MetricCategory.LOYALTY,
        description="Track when user removes an applied reward.",
        parameters="reward: object",
    ),

    # Error Events
    Metric(
        name="error",
        method="error(type, message, properties)",
        category=MetricCategory.ERROR,
        description="Track application errors with type and message.",
        parameters="type: string, message: string, properties?: object",
    ),

    # Experiment Events
    Metric(
        name="experiment_assigned",
        method="setExperiment(name, variant)",
        category=MetricCategory.EXPERIMENT,
        description="Track A/B test or experiment assignment.",
        parameters="experimentName: string, variant: string",
    ),

    # Custom Events
    Metric(
        name="custom",
        method="track(eventName, properties)",
        category=MetricCategory.NAVIGATION,
        description="Track any custom event with arbitrary properties.",
        parameters="eventName: string, properties?: object",
    ),
]


def get_catalog() -> MetricsCatalogResponse:
    """Return every metric with per-category counts."""
    counts = Counter(metric.category for metric in METRICS)
    categories = [
        CategoryInfo(id=category, label=label, count=counts[category])
        for category, label in CATEGORY_LABELS.items()
    ]
    return MetricsCatalogResponse(metrics=METRICS, categories=categories, total=len(METRICS))
