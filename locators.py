# locators.py
from selenium.webdriver.common.by import By


def _xpath(name, primary, *fallbacks):
    return {
        "name": name,
        "primary": {"type": By.XPATH, "value": primary},
        "fallbacks": [{"type": By.XPATH, "value": value} for value in fallbacks],
    }


class BaseLocators:
    HOME_LINK = _xpath(
        "nav.home",
        "//a[@class='nav-link' and text()='Home']",
        "//a[contains(@class,'nav-link') and contains(text(),'Home')]",
        "//a[text()='Home']",
        "//a[@href='index.html']",
        "//a[@class='navbar-brand']",
    )
    CART_LINK = _xpath(
        "nav.cart",
        "//a[@id='cartur']",
        "//*[@id='navbarExample']/ul/li[4]/a",
        "//a[contains(text(),'Cart')]",
    )
    LOGIN_LINK = _xpath("nav.login", "//a[@id='login2']")
    SIGN_UP_LINK = _xpath("nav.signup", "//a[@id='signin2']")
    LOGOUT_LINK = _xpath("nav.logout", "//a[@id='logout2']")
    LOGGED_USER = _xpath("nav.logged_user", "//a[@id='nameofuser']")
    LOADING_SPINNER = _xpath(
        "loading",
        "//div[contains(@class,'spinner') or contains(@class,'loading') or contains(@class,'loader')]",
    )


class LoginLocators:
    SIGNUP_MODAL = _xpath("signup.modal", "//div[@id='signInModal']")
    SIGNUP_USERNAME = _xpath("signup.username", "//input[@id='sign-username']")
    SIGNUP_PASSWORD = _xpath("signup.password", "//input[@id='sign-password']")
    SIGNUP_BUTTON = _xpath(
        "signup.submit",
        "//button[@onclick='register()']",
        "//div[@id='signInModal']//button[text()='Sign up']",
    )
    SIGNUP_MODAL_CLOSE = _xpath(
        "signup.close",
        "//div[@id='signInModal']//button[@class='close']",
        "//div[@id='signInModal']//button[text()='Close']",
    )
    LOGIN_MODAL = _xpath("login.modal", "//div[@id='logInModal']")
    LOGIN_USERNAME = _xpath("login.username", "//input[@id='loginusername']")
    LOGIN_PASSWORD = _xpath("login.password", "//input[@id='loginpassword']")
    LOGIN_BUTTON = _xpath(
        "login.submit",
        "//button[@onclick='logIn()']",
        "//div[@id='logInModal']//button[text()='Log in']",
    )
    LOGIN_MODAL_CLOSE = _xpath(
        "login.close",
        "//div[@id='logInModal']//button[@class='close']",
        "//div[@id='logInModal']//button[text()='Close']",
    )


class HomeLocators:
    CATEGORIES = {
        "phones": _xpath("category.phones", "//a[@onclick=\"byCat('phone')\"]", "//a[text()='Phones']"),
        "laptops": _xpath("category.laptops", "//a[@onclick=\"byCat('notebook')\"]", "//a[text()='Laptops']"),
        "monitors": _xpath("category.monitors", "//a[@onclick=\"byCat('monitor')\"]", "//a[text()='Monitors']"),
    }
    PRODUCTS_CONTAINER = _xpath("home.products", "//div[@id='tbodyid']")
    PRODUCT_CARDS = _xpath("home.product_cards", "//div[@id='tbodyid']//div[contains(@class,'card h-100')]")
    PRODUCT_TITLES = _xpath("home.product_titles", "//h4[@class='card-title']//a")
    PRODUCT_PRICES = _xpath("home.product_prices", "//div[@id='tbodyid']//h5[contains(text(),'$')]")

    # Parameterized by product name
    PRODUCT_LINK_BY_NAME = _xpath(
        "home.product_link",
        "//h4[@class='card-title']//a[contains(text(),{name})]",
        "//a[contains(text(),{name})]",
    )
    PRODUCT_PRICE_BY_NAME = _xpath(
        "home.product_price",
        "//a[contains(text(),{name})]/ancestor::div[@class='card-block']//h5",
        "//a[contains(text(),{name})]/ancestor::div[contains(@class,'card')]//h5",
    )

    NEXT_BUTTON = _xpath("home.next", "//button[@id='next2']")
    PREVIOUS_BUTTON = _xpath("home.previous", "//button[@id='prev2']")


class ProductLocators:
    PRODUCT_NAME = _xpath("product.name", "//h2[@class='name']")
    PRODUCT_PRICE = _xpath("product.price", "//h3[@class='price-container']")
    PRODUCT_IMAGE = _xpath("product.image", "//div[@id='imgp']//img", "//img[@class='img-fluid']")
    PRODUCT_DESCRIPTION = _xpath("product.description", "//div[@id='more-information']//p")
    ADD_TO_CART_BUTTON = _xpath(
        "product.add_to_cart",
        "//a[contains(@onclick,'addToCart')]",
        "//a[text()='Add to cart']",
    )


class CartLocators:
    CART_TBODY = _xpath("cart.table", "//tbody[@id='tbodyid']")
    CART_ROWS = _xpath("cart.rows", "//tbody[@id='tbodyid']//tr")
    # Relative to a cart row
    ROW_TITLE = "./td[2]"
    ROW_PRICE = "./td[3]"

    ITEM_ROW_BY_NAME = _xpath(
        "cart.item_row",
        "//tbody[@id='tbodyid']//td[contains(text(),{name})]/parent::tr",
    )
    DELETE_ITEM_BY_NAME = _xpath(
        "cart.delete_item",
        "//td[contains(text(),{name})]/following-sibling::td//a[contains(text(),'Delete')]",
        "//tr[td[contains(text(),{name})]]//a[contains(text(),'Delete')]",
        "//tr[contains(.,{name})]//a",
        "//tbody[@id='tbodyid']//tr[td[contains(text(),{name})]]//a",
    )
    TOTAL_AMOUNT = _xpath("cart.total", "//h3[@id='totalp']")
    PLACE_ORDER_BUTTON = _xpath(
        "cart.place_order",
        "//button[@class='btn btn-success' and text()='Place Order']",
        "//button[contains(@class,'btn-success') and contains(text(),'Place Order')]",
        "//button[text()='Place Order']",
    )


class CheckoutLocators:
    ORDER_MODAL = _xpath(
        "checkout.modal",
        "//div[@id='orderModal']",
        "//div[@class='modal fade show']",
        "//h4[contains(text(),'Place order')]",
    )
    CUSTOMER_NAME = _xpath("checkout.name", "//input[@id='name']")
    CUSTOMER_COUNTRY = _xpath("checkout.country", "//input[@id='country']")
    CUSTOMER_CITY = _xpath("checkout.city", "//input[@id='city']")
    CREDIT_CARD = _xpath("checkout.card", "//input[@id='card']")
    CARD_MONTH = _xpath("checkout.month", "//input[@id='month']")
    CARD_YEAR = _xpath("checkout.year", "//input[@id='year']")
    ORDER_TOTAL = _xpath("checkout.total", "//label[@id='totalm']")
    PURCHASE_BUTTON = _xpath(
        "checkout.purchase",
        "//button[@onclick='purchaseOrder()']",
        "//div[@id='orderModal']//button[text()='Purchase']",
    )
    CLOSE_ORDER_MODAL = _xpath(
        "checkout.close",
        "//div[@id='orderModal']//button[@class='close']",
        "//div[@id='orderModal']//button[text()='Close']",
    )

    CONFIRMATION = _xpath(
        "confirmation.modal",
        "//div[contains(@class,'sweet-alert') and contains(@class,'visible')]",
        "//div[contains(@class,'sweet-alert')]",
        "//h2[contains(text(),'Thank you for your purchase')]",
    )
    CONFIRMATION_MESSAGE = _xpath(
        "confirmation.message",
        "//div[contains(@class,'sweet-alert')]//p[contains(@class,'lead')]",
        "//p[@class='lead text-muted']",
    )
    OK_BUTTON = _xpath(
        "confirmation.ok",
        "//button[contains(@class,'confirm') and text()='OK']",
        "//button[text()='OK']",
        "//button[contains(@class,'confirm')]",
    )
